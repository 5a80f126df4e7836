"""Routing file (SSH client configuration) management."""

from ghswitch.routing.parser import BlockState, ScanResult, scan
from ghswitch.routing.reconciler import RoutingFileReconciler, backup_path_for, reconcile
from ghswitch.routing.template import render_block

__all__ = [
    "BlockState",
    "RoutingFileReconciler",
    "ScanResult",
    "backup_path_for",
    "reconcile",
    "render_block",
    "scan",
]
