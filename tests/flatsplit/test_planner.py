"""Tests for PartitionPlanner."""

from flatsplit.splitting import PartitionPlanner


class TestLegal:
    """Tests for the protected-subtree check."""

    def test_own_category_is_ignored(self) -> None:
        """A protected record may start a partition."""
        planner = PartitionPlanner(frozenset({"P"}), threshold=0, max_partitions=10)

        assert planner.legal(["x", "P"]) is True

    def test_protected_ancestor(self) -> None:
        planner = PartitionPlanner(frozenset({"P"}), threshold=0, max_partitions=10)

        assert planner.legal(["P", "x"]) is False
        assert planner.legal(["x", "P", "y", "z"]) is False

    def test_empty_stack(self) -> None:
        planner = PartitionPlanner(frozenset({"P"}), threshold=0, max_partitions=10)

        assert planner.legal([]) is True

    def test_no_protected_categories(self) -> None:
        planner = PartitionPlanner(frozenset(), threshold=0, max_partitions=10)

        assert planner.legal(["a", "b", "c"]) is True


class TestDue:
    """Tests for the size and count check."""

    def test_threshold_must_be_exceeded(self) -> None:
        planner = PartitionPlanner(frozenset(), threshold=100, max_partitions=10)

        assert planner.due(100, 1) is False
        assert planner.due(101, 1) is True

    def test_max_partitions_reached(self) -> None:
        planner = PartitionPlanner(frozenset(), threshold=0, max_partitions=3)

        assert planner.due(1000, 2) is True
        assert planner.due(1000, 3) is False


class TestDecide:
    def test_cut_requires_due_and_legal(self) -> None:
        planner = PartitionPlanner(frozenset({"P"}), threshold=10, max_partitions=5)

        assert planner.decide(11, 1, ["x"]).cut is True
        assert planner.decide(5, 1, ["x"]).cut is False
        assert planner.decide(11, 1, ["P", "x"]).cut is False
        assert planner.decide(11, 5, ["x"]).cut is False

    def test_decision_fields(self) -> None:
        planner = PartitionPlanner(frozenset({"P"}), threshold=10, max_partitions=5)

        decision = planner.decide(11, 1, ["P", "x"])

        assert decision.due is True
        assert decision.legal is False
