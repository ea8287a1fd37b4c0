from __future__ import annotations

import uuid

from flask import Flask, jsonify

from ..common.http import error_response, json_body, parse_coordinate, require_field
from ..container import Container
from ..core.enums import LocationRestrictionType
from ..core.exceptions import DomainError
from .model import AllowedLocation, AttendanceCenter, LocationRestrictionPolicy


def _center_to_dict(c: AttendanceCenter) -> dict:
    return {
        "id": c.center_id,
        "name": c.name,
        "nameEn": c.name_en,
        "nameAr": c.name_ar,
        "address": c.address,
        "coordinate": c.coordinate.to_dict(),
        "radiusMeters": c.radius_meters,
        "assignedEmployeeIds": sorted(c.assigned_employee_ids),
        "allowRemoteCheckout": c.allow_remote_checkout,
        "remoteCheckoutEmployeeIds": sorted(c.remote_checkout_employee_ids),
        "isActive": c.is_active,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/centers", methods=["GET"], endpoint="list_centers")
    def list_centers():
        centers = container.locations_repo.list_centers()
        return jsonify({"success": True, "centers": [_center_to_dict(c) for c in centers]})

    @app.route("/api/centers", methods=["POST"], endpoint="create_center")
    def create_center():
        try:
            data = json_body()
            center = AttendanceCenter(
                center_id=str(data.get("id") or uuid.uuid4().hex),
                name=str(require_field(data, "name")).strip(),
                name_en=data.get("nameEn"),
                name_ar=data.get("nameAr"),
                address=str(data.get("address") or ""),
                coordinate=parse_coordinate(data, "coordinate"),
                radius_meters=float(data.get("radiusMeters") or container.default_center_radius_meters),
                assigned_employee_ids=frozenset(data.get("assignedEmployeeIds") or ()),
                allow_remote_checkout=bool(data.get("allowRemoteCheckout", False)),
                remote_checkout_employee_ids=frozenset(data.get("remoteCheckoutEmployeeIds") or ()),
                is_active=bool(data.get("isActive", True)),
            )
            container.locations_repo.save_center(center)
            return jsonify({"success": True, "center": _center_to_dict(center)}), 201
        except DomainError as e:
            return error_response(e)

    @app.route("/api/policy", methods=["PUT"], endpoint="save_policy")
    def save_policy():
        try:
            data = json_body()
            locations = tuple(
                AllowedLocation(
                    name=str(loc.get("name") or ""),
                    address=str(loc.get("address") or ""),
                    coordinate=parse_coordinate({"coordinate": loc}, "coordinate"),
                    radius_meters=float(loc.get("radius") or 100.0),
                    applicable_employee_ids=frozenset(loc.get("applicableEmployeeIds") or ()),
                )
                for loc in data.get("allowedLocations") or ()
            )
            policy = LocationRestrictionPolicy(
                restriction_type=LocationRestrictionType.from_value(data.get("type")),
                allowed_locations=locations,
                applicable_employee_ids=frozenset(data.get("applicableEmployeeIds") or ()),
                name=str(data.get("name") or "Check-In Policy"),
                is_active=bool(data.get("isActive", True)),
            )
            container.locations_repo.save_policy(policy)
            return jsonify({"success": True, "type": policy.restriction_type.value, "locations": len(locations)})
        except DomainError as e:
            return error_response(e)
