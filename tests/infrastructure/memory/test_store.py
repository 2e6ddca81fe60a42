"""Tests specific to the in-memory repositories: isolation and concurrency."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from zonectl.domain.models import AgentRef
from zonectl.infrastructure.memory import (
    MemoryAgentRepository,
    MemoryProjectRepository,
    MemoryZoneRepository,
)


class TestCloneIsolation:
    def test_mutating_read_does_not_change_store(self) -> None:
        repo = MemoryZoneRepository()
        zone = repo.create("p1", "z", "", "", ["a"], [AgentRef(id="a1", name="x")])
        fetched = repo.get(zone.id)
        fetched.constraints.append("b")
        fetched.assigned_agents[0].name = "mutated"
        fetched.explicit_paths.append("leak")

        again = repo.get(zone.id)
        assert again.constraints == ["a"]
        assert again.assigned_agents[0].name == "x"
        assert again.explicit_paths == []

    def test_mutating_input_after_write_does_not_change_store(self) -> None:
        repo = MemoryZoneRepository()
        constraints = ["a"]
        zone = repo.create("p1", "z", "", "", constraints, [])
        constraints.append("b")
        assert repo.get(zone.id).constraints == ["a"]

    def test_list_returns_copies(self) -> None:
        repo = MemoryAgentRepository()
        repo.create("reviewer", "", "")
        repo.list()[0].name = "mutated"
        assert repo.list()[0].name == "reviewer"


class TestConcurrency:
    def test_concurrent_ignored_path_adds_are_not_lost(self) -> None:
        repo = MemoryProjectRepository()
        project = repo.create("app", "/tmp/x")

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda i: repo.add_ignored_path(project.id, f"dir{i}"), range(200)))

        assert sorted(repo.get(project.id).ignored_paths) == sorted(f"dir{i}" for i in range(200))

    def test_readers_never_see_shared_state(self) -> None:
        repo = MemoryZoneRepository()
        zone = repo.create("p1", "z", "", "", [], [])

        def writer(i: int) -> None:
            repo.assign_path(zone.id, f"path{i}")

        def reader(_: int) -> int:
            snapshot = repo.get(zone.id)
            before = list(snapshot.explicit_paths)
            snapshot.explicit_paths.append("reader-local")
            assert snapshot.explicit_paths[:-1] == before
            return len(before)

        with ThreadPoolExecutor(max_workers=8) as pool:
            writes = [pool.submit(writer, i) for i in range(100)]
            reads = [pool.submit(reader, i) for i in range(100)]
            for future in writes + reads:
                future.result()

        final = repo.get(zone.id).explicit_paths
        assert len(final) == 100
        assert "reader-local" not in final
