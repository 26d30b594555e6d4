"""HTTP middleware. Applied in cms.main; last added = outermost."""

from cms.middleware.request_id import RequestIDMiddleware

__all__ = ["RequestIDMiddleware"]
