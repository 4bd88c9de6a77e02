from datetime import timedelta

class Constants:
    ACCESS_TOKEN_LIFETIME = timedelta(minutes=60)
    REFRESH_TOKEN_LIFETIME = timedelta(days=1)
    DATE_FORMAT = "%Y-%m-%d"

    class CookieName:
        ACCESS_TOKEN = "accessToken"
        REFRESH_TOKEN = "refreshToken"

    class CookiePolicy:
        SAME_SITE = "Lax"

    class Field:
        REFRESH_TOKEN = "refreshToken"
