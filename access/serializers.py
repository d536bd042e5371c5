from __future__ import annotations

from rest_framework import serializers

from core.serializers import LeadSnapshotSerializer, UserSnapshotSerializer
from access.security import LEAD_ACTION_GUARDS


class VisibleLeadsQuerySerializer(serializers.Serializer):
    user = UserSnapshotSerializer(allow_null=True)
    leads = LeadSnapshotSerializer(many=True)
    team_members = UserSnapshotSerializer(many=True, required=False, default=list)


class VisibleTeamQuerySerializer(serializers.Serializer):
    user = UserSnapshotSerializer(allow_null=True)
    members = UserSnapshotSerializer(many=True)


class LeadAuthorizeCommandSerializer(serializers.Serializer):
    user = UserSnapshotSerializer(allow_null=True)
    action = serializers.ChoiceField(choices=sorted(LEAD_ACTION_GUARDS))  # view/edit/delete
    lead = LeadSnapshotSerializer()
    team_members = UserSnapshotSerializer(many=True, required=False, default=list)

    def to_internal_value(self, data):
        if isinstance(data, dict) and isinstance(data.get("action"), str):
            data = {**data, "action": data["action"].strip().lower()}
        return super().to_internal_value(data)


class CapabilitiesQuerySerializer(serializers.Serializer):
    user = UserSnapshotSerializer(allow_null=True)


class RouteCheckQuerySerializer(serializers.Serializer):
    user = UserSnapshotSerializer(allow_null=True)
    route = serializers.CharField(allow_blank=True, trim_whitespace=False)
