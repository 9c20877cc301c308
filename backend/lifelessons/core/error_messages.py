# lifelessons/core/error_messages.py
from fastapi import HTTPException, status


class ErrorResponses:
    # Auth
    MISSING_TOKEN = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized access",
        headers={"WWW-Authenticate": "Bearer"},
    )
    INVALID_TOKEN = HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden access")
    TOKEN_EXPIRED = HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Token has expired")
    INVALID_CREDENTIALS = HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    FORBIDDEN = HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden access")
    ADMIN_ONLY = HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access only")
    NOT_OWNER = HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not allowed to modify this lesson")

    # Lookups
    USER_NOT_FOUND = HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    LESSON_NOT_FOUND = HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Lesson not found")
    REPORT_NOT_FOUND = HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Report not found")
    FAVORITE_NOT_FOUND = HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Favorite not found")
    INVALID_ID = HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid id")

    # Writes
    PASSWORD_REQUIRED = HTTPException(status_code=422, detail="Password is required for a new account")
    EMPTY_UPDATE = HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No fields to update")
    DUPLICATE_PAYMENT = HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Payment already recorded")

