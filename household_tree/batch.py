"""Parallel tree building across many households.

Households share no state, so each one is built independently on a bounded
thread pool and the results are merged into a map keyed by household.
"""

import concurrent.futures
import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

from household_tree.assembly.classified import assemble_from_classified_edges
from household_tree.config import settings
from household_tree.inference import HouseholdForest, infer_from_flat_records
from household_tree.inference.relationships import coerce_members
from household_tree.schemas.members import HouseholdDescriptor, InputMember
from household_tree.schemas.tree import FamilyTreeView

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class BatchError(RuntimeError):
    """A household failed while building a batch."""

    def __init__(self, household_key: str, cause: BaseException):
        super().__init__(f"Household {household_key} failed: {cause}")
        self.household_key = household_key
        self.cause = cause


def household_key(ward_no: str | None, house_no: str) -> str:
    """Key identifying one household, ``<ward>/<house>`` or just the house number."""
    return f"{ward_no}/{house_no}" if ward_no else house_no


def group_by_household(
    members: Iterable[InputMember | Mapping[str, Any]],
) -> dict[str, list[InputMember]]:
    """Partition a flat member list by household, in first-seen order."""
    households: dict[str, list[InputMember]] = {}
    for member in coerce_members(members):
        households.setdefault(household_key(member.ward_no, member.house_no), []).append(member)
    return households


def _run_parallel(
    items: Mapping[str, T],
    build: Callable[[T], R],
    max_workers: int | None,
) -> dict[str, R]:
    workers = settings.resolve_workers(max_workers)
    results: dict[str, R] = {}
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        future_to_key = {executor.submit(build, item): key for key, item in items.items()}
        for future in concurrent.futures.as_completed(future_to_key):
            key = future_to_key[future]
            try:
                results[key] = future.result()
            except Exception as e:
                raise BatchError(key, e) from e
    logger.info("Built %d household trees with %d workers", len(results), workers)
    return results


def build_forests(
    households: Mapping[str, Sequence[InputMember | Mapping[str, Any]]],
    max_workers: int | None = None,
) -> dict[str, HouseholdForest]:
    """Infer a forest for every household in parallel.

    Args:
        households: Member lists keyed by household
        max_workers: Pool size, defaults to settings.batch_max_workers

    Returns:
        Forests keyed by household

    Raises:
        BatchError: If any household fails to build
    """
    return _run_parallel(households, infer_from_flat_records, max_workers)


def assemble_views(
    descriptors: Mapping[str, HouseholdDescriptor],
    max_workers: int | None = None,
) -> dict[str, FamilyTreeView]:
    """Assemble a head-centric view for every household in parallel.

    Args:
        descriptors: Classified households keyed by household
        max_workers: Pool size, defaults to settings.batch_max_workers

    Returns:
        Views keyed by household

    Raises:
        BatchError: If any household fails to build
    """
    return _run_parallel(descriptors, assemble_from_classified_edges, max_workers)
