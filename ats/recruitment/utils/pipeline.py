"""
Writes to the pipeline status collection.

Every function runs in one transaction holding a write lock on the whole
collection. On Postgres that is a table lock, so concurrent inserts wait too.
Rank updates are computed from the snapshot read under that lock with
:mod:`ats.core.utils.ranking` and applied before touching the target row.
Nothing is retried here; a failed transaction is rolled back and re-raised.
"""
import logging

from django.db import connection, transaction
from rest_framework.exceptions import NotFound

from ats.core.utils.ranking import plan_insert, plan_move, plan_remove
from ats.recruitment.models import CandidateVacancyStatus

logger = logging.getLogger(__name__)


def lock_statement(vendor, table):
    """
    SQL taking a table lock that conflicts with itself and with every write.

    None for backends whose write transactions are already serialised.
    """
    if vendor == 'postgresql':
        return f"LOCK TABLE {table} IN SHARE ROW EXCLUSIVE MODE"
    return None


def _lock_collection():
    statement = lock_statement(
        connection.vendor,
        connection.ops.quote_name(CandidateVacancyStatus._meta.db_table)
    )
    if statement:
        with connection.cursor() as cursor:
            cursor.execute(statement)


def _lock_ranks():
    # must be evaluated inside an atomic block, ranks are read after the lock
    # is granted so rows committed meanwhile are seen
    _lock_collection()
    return dict(
        CandidateVacancyStatus.objects.select_for_update().order_by(
            'sort', 'id'
        ).values_list('id', 'sort')
    )


def _apply(updates):
    if not updates:
        return
    statuses = CandidateVacancyStatus.objects.in_bulk([pk for pk, _ in updates])
    for pk, sort in updates:
        statuses[pk].sort = sort
    CandidateVacancyStatus.objects.bulk_update(statuses.values(), ['sort'])


def _clear_initial(exclude=None):
    qs = CandidateVacancyStatus.objects.filter(is_initial=True)
    if exclude is not None:
        qs = qs.exclude(id=exclude)
    qs.update(is_initial=False)


def create_status(name, sort=0, is_initial=False):
    """Insert a status at `sort`, shifting the ones at or after it down by one"""
    with transaction.atomic():
        ranks = _lock_ranks()
        position, updates = plan_insert(ranks, sort)
        _apply(updates)
        if is_initial:
            _clear_initial()
        status = CandidateVacancyStatus.objects.create(
            name=name, sort=position, is_initial=is_initial
        )
    logger.info(
        f"Created pipeline status {status.id} '{name}' at {position}, "
        f"shifted {len(updates)}"
    )
    return status


def update_status(status_id, **fields):
    """
    Update a status, moving it to `sort` when given.

    :raises NotFound: when the status no longer exists
    """
    with transaction.atomic():
        ranks = _lock_ranks()
        if status_id not in ranks:
            raise NotFound('Not found')
        position, updates = plan_move(ranks, status_id, fields.pop('sort', None))
        _apply(updates)
        if fields.get('is_initial'):
            _clear_initial(exclude=status_id)
        status = CandidateVacancyStatus.objects.get(id=status_id)
        for attr, value in fields.items():
            setattr(status, attr, value)
        status.sort = position
        status.save()
    logger.info(
        f"Updated pipeline status {status_id}, now at {position}, "
        f"shifted {len(updates)}"
    )
    return status


def delete_status(status_id):
    """
    Delete a status and close the gap it leaves.

    :raises NotFound: when the status no longer exists
    """
    with transaction.atomic():
        ranks = _lock_ranks()
        if status_id not in ranks:
            raise NotFound('Not found')
        updates = plan_remove(ranks, status_id)
        CandidateVacancyStatus.objects.filter(id=status_id).delete()
        _apply(updates)
    logger.info(f"Deleted pipeline status {status_id}, shifted {len(updates)}")


def initial_status():
    """The status new pipeline entries start at, falls back to the first ranked one"""
    return (
        CandidateVacancyStatus.objects.filter(is_initial=True).first()
        or CandidateVacancyStatus.objects.order_by('sort', 'id').first()
    )
