"""Tests for LockProvider implementations.

Tests cover:
- InMemoryLockProvider two-phase locking
- Lock release on exception
- Per-resource entries dropped once unused
- NoOpLockProvider for single-threaded tests
- Concurrent access serialization
"""

import threading
import time
from concurrent.futures import ThreadPoolExecutor, wait

import pytest

from invoice_payments.application.ports import LockProvider
from invoice_payments.infrastructure.lock_provider import (
    InMemoryLockProvider,
    NoOpLockProvider,
)

# =============================================================================
# InMemoryLockProvider Tests
# =============================================================================


class TestInMemoryLockProviderBasicBehavior:
    def test_implements_lock_provider_interface(self) -> None:
        assert isinstance(InMemoryLockProvider(), LockProvider)

    def test_same_resource_can_be_acquired_sequentially(self) -> None:
        provider = InMemoryLockProvider()
        acquisitions = 0

        with provider.acquire("INV-0001"):
            acquisitions += 1

        with provider.acquire("INV-0001"):
            acquisitions += 1

        assert acquisitions == 2

    def test_different_resources_use_different_locks(self) -> None:
        provider = InMemoryLockProvider()

        with provider.acquire("INV-A"), provider.acquire("INV-B"):
            assert provider.active_resources == 2


class TestInMemoryLockProviderExceptionSafety:
    def test_lock_released_on_exception(self) -> None:
        provider = InMemoryLockProvider()

        with pytest.raises(RuntimeError), provider.acquire("INV-0001"):
            raise RuntimeError("Simulated failure")

        acquired = False
        with provider.acquire("INV-0001"):
            acquired = True

        assert acquired is True

    def test_entry_dropped_after_exception(self) -> None:
        provider = InMemoryLockProvider()

        with pytest.raises(RuntimeError), provider.acquire("INV-0001"):
            raise RuntimeError("Simulated failure")

        assert provider.active_resources == 0


class TestInMemoryLockProviderEviction:
    def test_entry_dropped_after_release(self) -> None:
        provider = InMemoryLockProvider()

        with provider.acquire("INV-0001"):
            assert provider.active_resources == 1

        assert provider.active_resources == 0

    def test_entry_kept_while_waiter_present(self) -> None:
        provider = InMemoryLockProvider()
        waiter_started = threading.Event()
        order: list[str] = []

        def waiter() -> None:
            waiter_started.set()
            with provider.acquire("INV-0001"):
                order.append("waiter")

        with provider.acquire("INV-0001"):
            thread = threading.Thread(target=waiter)
            thread.start()
            waiter_started.wait()
            time.sleep(0.05)
            order.append("holder")
            assert provider.active_resources == 1

        thread.join(timeout=2)
        assert order == ["holder", "waiter"]
        assert provider.active_resources == 0


class TestInMemoryLockProviderConcurrency:
    def test_same_resource_is_serialized(self) -> None:
        provider = InMemoryLockProvider()
        inside = 0
        max_inside = 0
        counter_lock = threading.Lock()

        def critical_section() -> None:
            nonlocal inside, max_inside
            with provider.acquire("INV-0001"):
                with counter_lock:
                    inside += 1
                    max_inside = max(max_inside, inside)
                time.sleep(0.005)
                with counter_lock:
                    inside -= 1

        with ThreadPoolExecutor(max_workers=8) as executor:
            wait([executor.submit(critical_section) for _ in range(16)])

        assert max_inside == 1
        assert provider.active_resources == 0

    def test_different_resources_run_in_parallel(self) -> None:
        provider = InMemoryLockProvider()
        both_inside = threading.Barrier(2, timeout=2)

        def critical_section(resource_id: str) -> None:
            with provider.acquire(resource_id):
                both_inside.wait()

        with ThreadPoolExecutor(max_workers=2) as executor:
            futures = [executor.submit(critical_section, r) for r in ("INV-A", "INV-B")]
            wait(futures)

        for future in futures:
            future.result()  # Raises BrokenBarrierError if serialized


# =============================================================================
# NoOpLockProvider Tests
# =============================================================================


class TestNoOpLockProvider:
    def test_implements_lock_provider_interface(self) -> None:
        assert isinstance(NoOpLockProvider(), LockProvider)

    def test_allows_reentrant_acquisition(self) -> None:
        provider = NoOpLockProvider()

        with provider.acquire("INV-0001"), provider.acquire("INV-0001"):
            pass
