from pydantic import BaseModel


class StatisticsResponse(BaseModel):
    model_config = {
        'from_attributes': True,
        'json_schema_extra': {
            'example': {
                'total_reservations': 42,
                'active_reservations': 7,
                'average_party_size': 3.5,
                'table_utilization': 12.5,
            }
        },
    }

    total_reservations: int
    active_reservations: int
    average_party_size: float
    table_utilization: float
