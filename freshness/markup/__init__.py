"""Markup package — idempotent HTML mutations."""

from freshness.markup.mutator import Mutation, inject_badge, inject_json_ld, mutate

__all__ = ["Mutation", "inject_badge", "inject_json_ld", "mutate"]
