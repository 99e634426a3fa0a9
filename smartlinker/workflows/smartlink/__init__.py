"""Smartlink workflows."""

from smartlinker.workflows.smartlink.resolve_smartlink_wf import resolve_into_form_workflow

__all__ = ["resolve_into_form_workflow"]
