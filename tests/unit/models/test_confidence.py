"""Test confidence scoring."""
import itertools
import pytest
from datetime import date
from decimal import Decimal
from bill_extraction.models.confidence import score
from bill_extraction.models.schema import BillCategory


class TestScore:
    def test_nothing_found(self):
        assert score(None, None, BillCategory.OTHER) == 0

    def test_all_found(self):
        assert score(Decimal("10.00"), date(2024, 3, 15), BillCategory.WATER) == 100

    def test_amount_only(self):
        assert score(Decimal("10.00"), None, BillCategory.OTHER) == 40

    def test_due_date_only(self):
        assert score(None, date(2024, 3, 15), BillCategory.OTHER) == 40

    def test_category_only(self):
        assert score(None, None, BillCategory.RENT) == 20

    def test_amount_and_category(self):
        assert score(Decimal("89.99"), None, BillCategory.INTERNET) == 60

    def test_amount_and_due_date(self):
        assert score(Decimal("89.99"), date(2024, 3, 15), BillCategory.OTHER) == 80

    def test_range_is_six_values(self):
        seen = {
            score(amount, due_date, category)
            for amount, due_date, category in itertools.product(
                [None, Decimal("1.00")],
                [None, date(2024, 1, 1)],
                list(BillCategory),
            )
        }
        assert seen == {0, 20, 40, 60, 80, 100}
