from src.service.restaurant.domain.value_object.restaurant_statistics import RestaurantStatistics
from src.service.restaurant.domain.value_object.time_slot import TimeSlot

__all__ = ['RestaurantStatistics', 'TimeSlot']
