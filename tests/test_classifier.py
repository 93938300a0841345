"""Tests for the message parsers and format classifier."""

import pytest
import yaml

from budget_splitter.classifier.classifier import FormatClassifier
from budget_splitter.classifier.parsers import (
    normalize_yaml,
    parse_amount,
    parse_json_categories,
    parse_yaml_categories,
)
from budget_splitter.core.types import CategoryFormat, InputKind


class TestJSONParser:
    """Tests for parse_json_categories."""

    def test_parse_object(self):
        """Test a plain JSON object of weights."""
        categories = parse_json_categories('{"Food": 50, "Rent": 30, "Other": 20}')

        assert categories is not None
        assert categories.names == ("Food", "Rent", "Other")
        assert categories.weights["Food"] == 50

    def test_reject_non_objects(self):
        """Test that arrays, scalars and broken JSON are rejected."""
        assert parse_json_categories("[1, 2, 3]") is None
        assert parse_json_categories("100") is None
        assert parse_json_categories('{"Food": 50') is None
        assert parse_json_categories("") is None

    def test_reject_empty_object(self):
        """Test that {} is not a category definition."""
        assert parse_json_categories("{}") is None

    def test_reject_non_numeric_weights(self):
        """Test that strings, booleans, nulls and NaN are rejected."""
        assert parse_json_categories('{"Food": "fifty"}') is None
        assert parse_json_categories('{"Food": true}') is None
        assert parse_json_categories('{"Food": null}') is None
        assert parse_json_categories('{"Food": NaN}') is None
        assert parse_json_categories('{"Food": Infinity}') is None

    def test_reject_weight_too_large_for_float(self):
        """Test that a huge integer weight is rejected, not raised."""
        assert parse_json_categories('{"Food": ' + "9" * 400 + "}") is None

    def test_reject_empty_name(self):
        """Test that an empty category name is rejected."""
        assert parse_json_categories('{"": 10}') is None


class TestYAMLParser:
    """Tests for normalize_yaml and parse_yaml_categories."""

    def test_normalize_inserts_space(self):
        """Test that a colon glued to a digit gets a space."""
        assert normalize_yaml("Food:50") == "Food: 50"
        assert normalize_yaml("Food:50\nRent:30") == "Food: 50\nRent: 30"

    def test_normalize_leaves_spaced_text(self):
        """Test that already spaced text is unchanged."""
        assert normalize_yaml("Food: 50") == "Food: 50"
        assert normalize_yaml("Food:fifty") == "Food:fifty"

    def test_unspaced_yaml_is_a_plain_scalar(self):
        """Test the YAML behavior that normalization repairs."""
        assert yaml.safe_load("Food:50") == "Food:50"

    def test_parse_block_mapping(self):
        """Test an indentation/colon mapping."""
        categories = parse_yaml_categories("Food: 50\nRent: 30\nOther: 20")

        assert categories is not None
        assert categories.names == ("Food", "Rent", "Other")
        assert categories.weights == {"Food": 50, "Rent": 30, "Other": 20}

    def test_parse_without_spaces(self):
        """Test that Food:50 parses after normalization."""
        categories = parse_yaml_categories("Food:50\nRent:30.5")

        assert categories is not None
        assert categories.weights == {"Food": 50, "Rent": 30.5}

    def test_numeric_keys_become_names(self):
        """Test that non-string scalar keys are converted to names."""
        categories = parse_yaml_categories("2024: 10\n2025: 20")

        assert categories is not None
        assert categories.names == ("2024", "2025")

    def test_reject_non_mappings(self):
        """Test that scalars, lists and broken YAML are rejected."""
        assert parse_yaml_categories("hello") is None
        assert parse_yaml_categories("100") is None
        assert parse_yaml_categories("- 1\n- 2") is None
        assert parse_yaml_categories("Food: [") is None
        assert parse_yaml_categories("") is None

    def test_reject_non_numeric_values(self):
        """Test that null, text and boolean values are rejected."""
        assert parse_yaml_categories("Food:\nRent: 30") is None
        assert parse_yaml_categories("Food: lots") is None
        assert parse_yaml_categories("Food: yes") is None

    def test_reject_weight_too_large_for_float(self):
        """Test that a huge integer weight is rejected, not raised."""
        assert parse_yaml_categories("Food: " + "9" * 400) is None


class TestAmountParser:
    """Tests for parse_amount."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1000", 1000.0),
            (" 12.5 ", 12.5),
            ("-3", -3.0),
            ("+7", 7.0),
            (".5", 0.5),
            ("10.", 10.0),
            ("1e3", 1000.0),
        ],
    )
    def test_valid_amounts(self, text, expected):
        """Test integers and decimals."""
        assert parse_amount(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "abc", "$100", "1,000", "1_000", "1+2", "10 20", "inf", "nan", "1e999"],
    )
    def test_invalid_amounts(self, text):
        """Test that symbols, separators, expressions and non-finite values fail."""
        assert parse_amount(text) is None


class TestFormatClassifier:
    """Tests for FormatClassifier.classify."""

    def test_json_wins_over_yaml(self):
        """Test that text valid as both formats is classified as JSON."""
        text = '{"Food": 50, "Rent": 30}'
        # also a valid YAML flow mapping
        assert parse_yaml_categories(text) is not None

        result = FormatClassifier().classify(text)

        assert result.kind == InputKind.CATEGORIES_JSON
        assert result.source_format == CategoryFormat.JSON
        assert result.categories.weights == {"Food": 50, "Rent": 30}

    def test_yaml_classification(self):
        """Test that YAML text is classified as YAML."""
        result = FormatClassifier().classify("Food:50\nRent:30\nOther:20")

        assert result.kind == InputKind.CATEGORIES_YAML
        assert result.source_format == CategoryFormat.YAML
        assert result.categories.names == ("Food", "Rent", "Other")

    def test_number_is_split_request(self):
        """Test that a plain number is a split request."""
        result = FormatClassifier().classify("  125000  ")

        assert result.kind == InputKind.SPLIT_REQUEST
        assert result.amount == 125000.0
        assert result.categories is None
        assert result.source_format is None

    @pytest.mark.parametrize("text", ["", "   ", "hello", "{}", "[1, 2]", "1,000", "$5", "2*3"])
    def test_unrecognized(self, text):
        """Test texts that match no format."""
        result = FormatClassifier().classify(text)

        assert result.kind == InputKind.UNRECOGNIZED
        assert result.categories is None
        assert result.amount is None

    def test_parser_order_is_configurable(self):
        """Test that the first configured parser wins."""
        classifier = FormatClassifier(
            category_parsers=[(InputKind.CATEGORIES_YAML, parse_yaml_categories)]
        )

        result = classifier.classify('{"Food": 50}')

        assert result.kind == InputKind.CATEGORIES_YAML

    def test_classify_amount_skips_categories(self):
        """Test classify_amount on category text and on a number."""
        classifier = FormatClassifier()

        assert classifier.classify_amount('{"Food": 50}').kind == InputKind.UNRECOGNIZED
        assert classifier.classify_amount("42").amount == 42.0
