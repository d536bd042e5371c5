# core/serializers.py
from __future__ import annotations

from rest_framework import serializers

from core.entities import Lead, Role, User

ROLE_CHOICES = [r.value for r in Role]

# Lead fields that are access-relevant; everything else is opaque payload
LEAD_KEY_FIELDS = ("id", "assigned_to")


class UserSnapshotSerializer(serializers.Serializer):
    id = serializers.CharField()
    role = serializers.ChoiceField(choices=ROLE_CHOICES)
    manager_id = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)
    name = serializers.CharField(required=False, allow_blank=True, default="")
    email = serializers.CharField(required=False, allow_blank=True, default="")

    def to_internal_value(self, data):
        attrs = super().to_internal_value(data)
        return User(
            id=attrs["id"],
            role=attrs["role"],
            manager_id=attrs.get("manager_id") or None,
            name=attrs.get("name", ""),
            email=attrs.get("email", ""),
        )

    def to_representation(self, instance: User):
        return {
            "id": instance.id,
            "role": instance.role,
            "manager_id": instance.manager_id,
            "name": instance.name,
            "email": instance.email,
        }


class LeadSnapshotSerializer(serializers.Serializer):
    """
    Accepts any lead object as long as it carries an id.
    Extra keys (name, budget, status, ...) are kept and echoed back untouched.
    """
    id = serializers.CharField()
    assigned_to = serializers.CharField(required=False, allow_null=True, allow_blank=True, default=None)

    def to_internal_value(self, data):
        attrs = super().to_internal_value(data)
        payload = {k: v for k, v in data.items() if k not in LEAD_KEY_FIELDS} if isinstance(data, dict) else {}
        return Lead(id=attrs["id"], assigned_to=attrs.get("assigned_to") or None, payload=payload)

    def to_representation(self, instance: Lead):
        return {**instance.payload, "id": instance.id, "assigned_to": instance.assigned_to}
