from src.service.restaurant.app.dto.reservation_result import ReservationResult

__all__ = ['ReservationResult']
