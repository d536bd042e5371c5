from __future__ import annotations

import logging

from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView

from core.api.exceptions import PermissionDeniedError
from core.api.responses import fail, invalid, ok
from core.serializers import LeadSnapshotSerializer, UserSnapshotSerializer
from core.utils.context import build_ctx
from access.controller import (
    can_access_route,
    capabilities,
    get_visible_leads,
    get_visible_team_members,
    is_registered_route,
)
from access.security import LEAD_ACTION_GUARDS
from access.serializers import (
    CapabilitiesQuerySerializer,
    LeadAuthorizeCommandSerializer,
    RouteCheckQuerySerializer,
    VisibleLeadsQuerySerializer,
    VisibleTeamQuerySerializer,
)

logger = logging.getLogger(__name__)


def unknown_routes_allowed() -> bool:
    return bool(getattr(settings, "ACCESS_CONTROL", {}).get("UNKNOWN_ROUTES_ALLOWED", True))


class VisibleLeadsAPI(APIView):
    """
    Filters the caller's lead snapshot down to what `user` may see.
    """

    @extend_schema(request=VisibleLeadsQuerySerializer, responses=LeadSnapshotSerializer(many=True))
    def post(self, request):
        ser = VisibleLeadsQuerySerializer(data=request.data)
        if not ser.is_valid():
            return invalid(ser.errors)

        user = ser.validated_data["user"]
        leads = ser.validated_data["leads"]
        visible = get_visible_leads(user, leads, ser.validated_data["team_members"])

        logger.debug("visible leads user=%s %d/%d", getattr(user, "id", None), len(visible), len(leads))
        return ok(
            data=LeadSnapshotSerializer(visible, many=True).data,
            meta={"total": len(leads), "visible": len(visible)},
        )


class VisibleTeamAPI(APIView):

    @extend_schema(request=VisibleTeamQuerySerializer, responses=UserSnapshotSerializer(many=True))
    def post(self, request):
        ser = VisibleTeamQuerySerializer(data=request.data)
        if not ser.is_valid():
            return invalid(ser.errors)

        members = ser.validated_data["members"]
        visible = get_visible_team_members(ser.validated_data["user"], members)
        return ok(
            data=UserSnapshotSerializer(visible, many=True).data,
            meta={"total": len(members), "visible": len(visible)},
        )


class LeadAuthorizeCommandAPI(APIView):

    @extend_schema(request=LeadAuthorizeCommandSerializer)
    def post(self, request):
        ser = LeadAuthorizeCommandSerializer(data=request.data)
        if not ser.is_valid():
            return invalid(ser.errors)

        action = ser.validated_data["action"]
        lead = ser.validated_data["lead"]
        ctx = build_ctx(request, actor=ser.validated_data["user"])
        guard = LEAD_ACTION_GUARDS[action]

        try:
            guard(ctx, lead, ser.validated_data["team_members"])
        except PermissionDeniedError as e:
            return fail(errors=[e.as_error()], meta={"action": action, "lead_id": lead.id}, status=403)

        return ok(data={"allowed": True}, meta={"action": action, "lead_id": lead.id})


class CapabilitiesAPI(APIView):

    @extend_schema(request=CapabilitiesQuerySerializer)
    def post(self, request):
        ser = CapabilitiesQuerySerializer(data=request.data)
        if not ser.is_valid():
            return invalid(ser.errors)
        return ok(data=capabilities(ser.validated_data["user"]))


class RouteCheckAPI(APIView):

    @extend_schema(request=RouteCheckQuerySerializer)
    def post(self, request):
        ser = RouteCheckQuerySerializer(data=request.data)
        if not ser.is_valid():
            return invalid(ser.errors)

        route = ser.validated_data["route"]
        registered = is_registered_route(route)
        allowed = can_access_route(
            ser.validated_data["user"],
            route,
            unknown_routes_allowed=unknown_routes_allowed(),
        )
        if not registered:
            logger.info("unregistered route checked: %s (allowed=%s)", route, allowed)

        return ok(data={"route": route, "allowed": allowed, "registered": registered})
