"""API Container (composition root state holder).

This module only defines types/structure for objects created in the real
composition root (`velaapi/interfaces/api/main.py`).
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from sqlalchemy.orm import Session

from velaapi.domain.ports import AppCounter, ClusterStore, DeliveryTargetStore, ProjectStore


@dataclass(frozen=True, slots=True)
class ApiContainer:
    """Typed container attached to `app.state.container`."""

    delivery_target_store: Callable[[Session], DeliveryTargetStore]
    project_store: Callable[[Session], ProjectStore]
    cluster_store: Callable[[Session], ClusterStore]
    app_counter: Callable[[Session], AppCounter]
