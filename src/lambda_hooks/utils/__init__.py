from lambda_hooks.utils.response import bad_request, ok, response, server_error

__all__ = ["response", "ok", "bad_request", "server_error"]
