"""Tests for ItemPatternMatcher component."""

import pytest
from src.parsers.item_patterns import ItemPatternMatcher


class TestItemPatternMatcher:
    """Test suite for ItemPatternMatcher."""

    def setup_method(self):
        """Set up test fixtures."""
        self.matcher = ItemPatternMatcher()

    def test_dash_separated_line(self):
        """Test the Name - Qty unit - Price form."""
        result = self.matcher.parse("Apple - 5 pcs - $2.50")

        assert result is not None
        assert result.name == "Apple"
        assert result.quantity == 5
        assert result.price == 2.50
        assert result.unit == "pcs"
        assert result.pattern == "dash"
        assert result.confidence == 0.9

    def test_dash_unit_line(self):
        """Test Name Qty+unit - Price, as printed by supermarkets."""
        result = self.matcher.parse("Rice 5kg - $12.00")

        assert result is not None
        assert result.name == "Rice"
        assert result.quantity == 5
        assert result.price == 12.00
        assert result.unit == "kg"
        assert result.pattern == "dash_unit"

    def test_en_and_em_dashes(self):
        """Test typographic dashes and other currency symbols."""
        result = self.matcher.parse("Milk – 2 bottles — €4.50")

        assert result is not None
        assert result.name == "Milk"
        assert result.quantity == 2
        assert result.price == 4.50
        assert result.unit == "bottles"

    def test_dash_pattern_wins_over_fallback(self):
        """A line that also fits Name Price must use the detailed pattern."""
        result = self.matcher.parse("Banana - 10 pcs - $1.80")

        assert result.pattern == "dash"
        assert result.quantity == 10

    def test_multiply_line(self):
        """Test Name Qty x Price."""
        cases = [
            ("Eggs 12 x $0.25", "Eggs", 12, 0.25, "pcs"),
            ("Oranges 3 kg × 1.20", "Oranges", 3, 1.20, "kg"),
            ("Yogurt 4 X £0.80", "Yogurt", 4, 0.80, "pcs"),
        ]

        for line, name, quantity, price, unit in cases:
            result = self.matcher.parse(line)

            assert result is not None, f"Failed to parse: {line}"
            assert result.pattern == "multiply", line
            assert (result.name, result.quantity, result.price, result.unit) == (name, quantity, price, unit)

    def test_quantity_first_line(self):
        """Test Qty [unit] Name Price, where groups come out reordered."""
        result = self.matcher.parse("2 kg Potatoes $3.10")

        assert result is not None
        assert result.pattern == "quantity_first"
        assert result.name == "Potatoes"
        assert result.quantity == 2
        assert result.price == 3.10
        assert result.unit == "kg"

        result = self.matcher.parse("3 Bananas 1.50")
        assert (result.name, result.quantity, result.price) == ("Bananas", 3, 1.50)

    def test_quantity_first_with_trailing_text(self):
        """Text after the price does not stop the quantity-first form."""
        result = self.matcher.parse("2 Apples $3.00 each")

        assert result is not None
        assert result.pattern == "quantity_first"
        assert (result.name, result.quantity, result.price) == ("Apples", 2, 3.00)

    def test_colon_at_line(self):
        """Test Name: Qty @ Price."""
        result = self.matcher.parse("Milk: 2 bottles @ $1.20")

        assert result is not None
        assert result.pattern == "colon"
        assert result.name == "Milk"
        assert result.quantity == 2
        assert result.price == 1.20
        assert result.unit == "bottles"

    @pytest.mark.parametrize("line, name, price", [
        ("Coke 2 $1.50", "Coke 2", 1.50),
        ("Orange Juice\t3\t$5.99", "Orange Juice 3", 5.99),
        ("Cooking Oil 1L $4.50", "Cooking Oil 1L", 4.50),
    ])
    def test_unseparated_quantity_uses_name_price(self, line, name, price):
        """Without a dash, x, @ or leading quantity only the trailing price is taken."""
        result = self.matcher.parse(line)

        assert result is not None
        assert result.pattern == "name_price"
        assert result.name == name
        assert result.quantity == 1
        assert result.price == price

    def test_name_price_fallback(self):
        """Test Name Price with quantity defaulting to one."""
        result = self.matcher.parse("Bread $2.00")

        assert result is not None
        assert result.pattern == "name_price"
        assert result.name == "Bread"
        assert result.quantity == 1
        assert result.price == 2.00
        assert result.confidence == 0.7

    def test_rupee_price(self):
        """Test rupee amounts without decimals."""
        result = self.matcher.parse("Basmati Rice - 2 kg - ₹120")

        assert result.name == "Basmati Rice"
        assert result.price == 120

    @pytest.mark.parametrize("line, price", [
        ("Basmati Rice - 1 kg - ₹1,200", 1200),
        ("Television - 1 - $2,500.00", 2500),
        ("Sofa $1,299.99", 1299.99),
    ])
    def test_thousands_separators(self, line, price):
        """Test comma grouped prices are read whole."""
        result = self.matcher.parse(line)

        assert result is not None
        assert result.price == price

    def test_zero_quantity_defaults_to_one(self):
        """Quantities must stay positive."""
        result = self.matcher.parse("Apple - 0 pcs - $2.50")

        assert result is not None
        assert result.quantity == 1

    def test_short_names_fall_through(self):
        """Matches whose name cleans to nothing do not produce an item."""
        assert self.matcher.parse("12 - $3.00") is None

    @pytest.mark.parametrize("line", [
        "Fresh Organic Spinach Bunch",
        "Cashier: John Doe",
    ])
    def test_lines_without_numbers(self, line):
        """Test that text-only lines are left for name-only extraction."""
        assert self.matcher.parse(line) is None
