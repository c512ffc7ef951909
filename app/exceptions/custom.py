class HotelBookingError(Exception):
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(HotelBookingError):
    status_code = 400


class MissingFieldsError(ValidationError):
    def __init__(self, fields: list[str] | None = None):
        self.fields = fields or []
        super().__init__("Missing required fields")


class InvalidInputError(ValidationError):
    pass


class DuplicateUserError(ValidationError):
    def __init__(self):
        super().__init__("User already exists")


class InvalidCredentialsError(ValidationError):
    def __init__(self):
        super().__init__("Invalid credentials")


class UnauthenticatedError(HotelBookingError):
    status_code = 401

    def __init__(self, message: str = "No token provided"):
        super().__init__(message)


class InvalidTokenError(UnauthenticatedError):
    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class NotFoundError(HotelBookingError):
    status_code = 404


class UnknownUserError(NotFoundError):
    def __init__(self):
        super().__init__("User not found")


class HotelNotFoundError(NotFoundError):
    def __init__(self):
        super().__init__("Hotel not found")


class RoomTypeNotFoundError(NotFoundError):
    def __init__(self):
        super().__init__("Room type not found")

