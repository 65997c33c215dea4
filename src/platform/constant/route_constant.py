# API Route Constants
# Router paths are relative to API_BASE; app_factory mounts every router under it

# Base API
API_BASE = '/api'

# Common
HEALTH = '/health'
METRICS = '/metrics'

# Customer routes
CUSTOMERS = '/customers'
CUSTOMER_DETAIL = '/customers/{customer_id}'
CUSTOMER_RESERVATIONS = '/customer/{customer_id}/reservations'

# Reservation routes
RESERVATIONS = '/reservations'
RESERVATION_DETAIL = '/reservations/{reservation_id}'

# Availability routes
AVAILABILITY = '/availability'

# Admin routes
ADMIN_RESERVATIONS = '/admin/reservations'
ADMIN_STATISTICS = '/admin/statistics'
ADMIN_TABLES = '/admin/tables'
ADMIN_TABLE_DETAIL = '/admin/tables/{table_id}'
