"""Serialization module — export plans as JSON."""

from plan_engine.serialization.plan_json import to_plan_dict, to_plan_json_string

__all__ = ["to_plan_dict", "to_plan_json_string"]
