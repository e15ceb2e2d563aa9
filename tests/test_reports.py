"""Tests for reporting helpers."""

import pytest
from datetime import datetime, timedelta, UTC
from decimal import Decimal

from classfund.domain.entities import BalanceMode, Direction, EntryStatus, Member
from classfund.domain.reports import (
    classroom_statistics,
    member_balances,
    members_from_entries,
    period_matrix,
    top_contributors,
)

ALICE = Member(id="u1", label="Alice")
BOB = Member(id="u2", label="Bob")
CAROL = Member(id="u3", label="Carol")


@pytest.fixture
def entries(make_entry):
    """Approved, pending and rejected entries for three members."""
    return [
        make_entry(amount="60", owner_id="u1", period="July"),
        make_entry(amount="40", owner_id="u1", period="August"),
        make_entry(amount="60", owner_id="u2", owner_label="Bob", period="July"),
        make_entry(amount="20", owner_id=None, owner_label="Class fund", period="July"),
        make_entry(amount="15", direction=Direction.EXPENSE, owner_id=None, owner_label="Class fund"),
        make_entry(amount="60", status=EntryStatus.PENDING, owner_id="u3", owner_label="Carol"),
        make_entry(amount="60", status=EntryStatus.REJECTED, owner_id="u3", owner_label="Carol"),
    ]


class TestClassroomStatistics:
    """Tests for dashboard statistics."""

    def test_statistics(self, entries):
        """Test totals, pending count and approval rate."""
        stats = classroom_statistics(entries)
        assert stats.total_income == Decimal("180")
        assert stats.total_expense == Decimal("15")
        assert stats.balance == Decimal("165")
        assert stats.pending_count == 1
        # 5 of 7 approved
        assert stats.approval_rate == Decimal("71.4")

    def test_empty(self):
        """Test statistics with no entries."""
        stats = classroom_statistics([])
        assert stats.total_income == Decimal("0")
        assert stats.pending_count == 0
        assert stats.approval_rate == Decimal("0.0")


class TestMembers:
    """Tests for member directory helpers."""

    def test_members_from_entries(self, entries):
        """Test that owners become members sorted by label."""
        assert members_from_entries(entries) == [ALICE, BOB, CAROL]

    def test_latest_label_wins(self, make_entry):
        """Test that a renamed member shows the most recent label."""
        now = datetime.now(UTC)
        entries = [
            make_entry(owner_label="Ally", created_at=now),
            make_entry(owner_label="Alice", created_at=now - timedelta(days=1)),
        ]
        assert members_from_entries(entries) == [Member(id="u1", label="Ally")]

    def test_member_balances(self, entries):
        """Test per-member balances in directory order."""
        totals = member_balances(entries, [ALICE, BOB, CAROL])
        assert [(t.member.id, t.amount, t.count) for t in totals] == [
            ("u1", Decimal("100"), 2),
            ("u2", Decimal("60"), 1),
            ("u3", Decimal("0"), 0),
        ]

    def test_member_balances_expense_mode(self, entries):
        """Test per-member expense totals."""
        totals = member_balances(entries, [ALICE], mode=BalanceMode.EXPENSE_ONLY)
        assert totals[0].amount == Decimal("0")


class TestTopContributors:
    """Tests for contributor ranking."""

    def test_ranking(self, entries):
        """Test that members are ranked by deposits and zero totals dropped."""
        ranked = top_contributors(entries, [BOB, CAROL, ALICE])
        assert [t.member for t in ranked] == [ALICE, BOB]
        assert ranked[0].amount == Decimal("100")
        assert ranked[0].count == 2

    def test_ties_are_ordered_by_label(self, make_entry):
        """Test that equal totals are ordered alphabetically."""
        entries = [
            make_entry(amount="50", owner_id="u2", owner_label="Bob"),
            make_entry(amount="50", owner_id="u1", owner_label="Alice"),
        ]
        ranked = top_contributors(entries, [BOB, ALICE])
        assert [t.member for t in ranked] == [ALICE, BOB]

    def test_limit(self, make_entry):
        """Test that only the top N are returned."""
        members = [Member(id=f"u{i}", label=f"Member {i:02d}") for i in range(15)]
        entries = [make_entry(amount=str(i + 1), owner_id=m.id, owner_label=m.label) for i, m in enumerate(members)]

        assert len(top_contributors(entries, members)) == 10
        assert len(top_contributors(entries, members, limit=3)) == 3
        assert len(top_contributors(entries, members, limit=None)) == 15
        assert top_contributors(entries, members, limit=1)[0].member.id == "u14"


class TestPeriodMatrix:
    """Tests for the member by period matrix."""

    def test_matrix(self, entries):
        """Test cells, row totals and column totals."""
        matrix = period_matrix(entries, [ALICE, BOB, CAROL], ["July", "August"])

        assert matrix.periods == ("July", "August")
        alice, bob, carol = matrix.rows
        assert alice.amounts == {"July": Decimal("60"), "August": Decimal("40")}
        assert alice.total == Decimal("100")
        assert bob.amounts["August"] == Decimal("0")
        assert carol.total == Decimal("0")
        # Column totals include the general July entry
        assert matrix.period_totals == {"July": Decimal("140"), "August": Decimal("40")}
        assert matrix.grand_total == Decimal("180")
