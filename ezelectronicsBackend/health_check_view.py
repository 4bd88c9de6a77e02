from django.db import OperationalError, connection
from django.http import HttpResponse

def health(request):
    """
    Health check endpoint for Load Balancer.
    Answers 503 when the database cannot be reached.
    """
    try:
        connection.ensure_connection()
    except OperationalError:
        return HttpResponse("DB UNAVAILABLE", content_type="text/plain", status=503)
    return HttpResponse("OK", content_type="text/plain")
