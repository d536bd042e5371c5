from __future__ import annotations

import logging

from django.utils.deprecation import MiddlewareMixin
from .utils.ids import new_request_id

logger = logging.getLogger(__name__)


class RequestIdMiddleware(MiddlewareMixin):
    HEADER_NAME = "HTTP_X_REQUEST_ID"

    def process_request(self, request):
        request.request_id = (request.META.get(self.HEADER_NAME) or new_request_id())[:64]

    def process_response(self, request, response):
        rid = getattr(request, "request_id", None)
        if rid:
            response["X-Request-Id"] = rid
        logger.debug("%s %s -> %s [%s]", request.method, request.path, response.status_code, rid)
        return response
