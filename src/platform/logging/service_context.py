"""
Service context for log lines: `<service>@<env>:<instance>`.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'restaurant-api')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container hostname when deployed, PID for local development
    instance = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
