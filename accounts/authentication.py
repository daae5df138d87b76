from rest_framework_simplejwt.authentication import JWTAuthentication


class HeaderJWTAuthentication(JWTAuthentication):
    """
    Bearer-token auth reading the Authorization header via request.headers.

    The authenticated user is also set on the underlying Django request so the
    activity log (which sees only the HttpRequest) can attribute entries.
    """

    def get_header(self, request):
        # DRF Request implements .headers which is case-insensitive
        auth = request.headers.get("Authorization")

        if isinstance(auth, str):
            auth = auth.encode("iso-8859-1")

        return auth

    def authenticate(self, request):
        result = super().authenticate(request)
        if result is not None:
            django_request = getattr(request, "_request", None)
            if django_request is not None:
                django_request.user = result[0]
        return result
