"""Permissions dashboard models"""

from permissions_dashboard.models.namespace import NamespaceDefinition, Relation
from permissions_dashboard.models.view import DashboardArgs, ViewModel

__all__ = [
    "DashboardArgs",
    "NamespaceDefinition",
    "Relation",
    "ViewModel",
]
