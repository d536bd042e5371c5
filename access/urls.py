from django.urls import path
from .views import (
    CapabilitiesAPI,
    LeadAuthorizeCommandAPI,
    RouteCheckAPI,
    VisibleLeadsAPI,
    VisibleTeamAPI,
)

urlpatterns = [
    path("v1/access/leads/visible/", VisibleLeadsAPI.as_view(), name="access_visible_leads"),
    path("v1/access/leads/authorize/", LeadAuthorizeCommandAPI.as_view(), name="access_lead_authorize"),
    path("v1/access/team/visible/", VisibleTeamAPI.as_view(), name="access_visible_team"),

    path("v1/access/capabilities/", CapabilitiesAPI.as_view(), name="access_capabilities"),
    path("v1/access/routes/check/", RouteCheckAPI.as_view(), name="access_route_check"),
]
