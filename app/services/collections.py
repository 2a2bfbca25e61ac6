"""Three-way sync of a child collection against an incoming list.

Planning is a pure function over ids so it can be reasoned about (and tested)
without a database. Execution applies the plan with one bulk delete followed
by per-row creates and updates.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Iterable, List, Optional, TypeVar

from sqlalchemy.orm import Session

P = TypeVar("P")


@dataclass(frozen=True)
class Create(Generic[P]):
    payload: P


@dataclass(frozen=True)
class Update(Generic[P]):
    id: str
    payload: P


@dataclass
class SyncPlan(Generic[P]):
    delete_ids: List[str] = field(default_factory=list)
    upserts: List[Any] = field(default_factory=list)  # Create | Update, in payload order


def plan_sync(existing_ids: Iterable[str], payloads: Iterable[P], skip_ids: Iterable[str] = ()) -> SyncPlan[P]:
    """Decide what to delete, update and create.

    - existing ids missing from the payloads are deleted
    - a payload whose id is an existing id is an update
    - anything else is a create; an unknown id is dropped
    - payloads whose id is in ``skip_ids`` are ignored
    """
    existing = set(existing_ids)
    skip = {s for s in skip_ids if s}
    kept = [p for p in payloads if not (p.id and p.id in skip)]

    incoming_ids = {p.id for p in kept if p.id}
    plan: SyncPlan[P] = SyncPlan()
    plan.delete_ids = sorted(existing - incoming_ids)

    for payload in kept:
        if payload.id and payload.id in existing:
            plan.upserts.append(Update(payload.id, payload))
        else:
            plan.upserts.append(Create(payload))
    return plan


def apply_sync(
    db: Session,
    model,
    parent_key: str,
    parent_id: str,
    existing_rows: Iterable[Any],
    payloads: Iterable[P],
    apply_fields: Callable[[Any, P], None],
    *,
    skip_ids: Iterable[str] = (),
    before_delete: Optional[Callable[[List[str]], Any]] = None,
    after_upsert: Optional[Callable[[Any, P], Any]] = None,
) -> List[Any]:
    """Run :func:`plan_sync` and persist it. Returns the upserted rows in payload order."""
    rows: Dict[str, Any] = {row.id: row for row in existing_rows}
    plan = plan_sync(rows.keys(), payloads, skip_ids)

    # Deletes go first so a reused id can never collide with a stale row
    if plan.delete_ids:
        if before_delete is not None:
            before_delete(plan.delete_ids)
        db.query(model).filter(model.id.in_(plan.delete_ids)).delete(synchronize_session="fetch")
        for deleted_id in plan.delete_ids:
            rows.pop(deleted_id)

    upserted = []
    for step in plan.upserts:
        if isinstance(step, Update):
            row = rows[step.id]
        else:
            row = model(**{parent_key: parent_id})
            db.add(row)
        apply_fields(row, step.payload)
        db.flush()
        if after_upsert is not None:
            after_upsert(row, step.payload)
        upserted.append(row)
    return upserted
