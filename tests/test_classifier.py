import json

from ocrscanner import classify, best_match, is_valid_modulus10
from ocrscanner.extraction import Classifier, ExtractionKind
from ocrscanner.postprocessor import AmountNormalizer


class TestReference:
    """Reference number extraction"""

    def test_reference_scenario(self):
        results = classify("1234567 #")

        assert len(results) == 1
        result = results[0]
        assert result.kind is ExtractionKind.REFERENCE
        assert result.raw_value == "1234567 #"
        assert result.formatted_value == "1234567"
        assert result.is_valid == is_valid_modulus10("1234567")
        assert result.is_valid is False

    def test_valid_reference(self):
        (result,) = classify("1234566 #")
        assert result.is_valid is True
        assert result.amount == 0.0

    def test_reference_inside_longer_text(self):
        (result,) = classify("Referens 1234566 # Att betala")
        assert result.formatted_value == "1234566"

    def test_hash_must_be_followed_by_whitespace_or_end(self):
        assert classify("1234566 #x") == []

    def test_too_few_digits(self):
        assert classify("12 #") == []

    def test_leading_zeros_preserved(self):
        (result,) = classify("0012300 #")
        assert result.formatted_value == "0012300"

    def test_multiple_references(self):
        results = classify("1234566 # 2139 #")
        assert [r.formatted_value for r in results] == ["1234566", "2139"]
        assert all(r.kind is ExtractionKind.REFERENCE for r in results)
        assert all(r.is_valid for r in results)


class TestAmount:
    """Amount extraction"""

    def test_amount_scenario(self):
        (result,) = classify("12345 12 3")

        assert result.kind is ExtractionKind.AMOUNT
        assert result.raw_value == "12345 12 3"
        assert result.formatted_value == "12345,12"
        assert result.amount == 12345.12
        assert result.is_valid == is_valid_modulus10("1234512" + "3")

    def test_valid_amount(self):
        (result,) = classify("12345 13 8")
        assert result.amount == 12345.13
        assert result.is_valid is True

    def test_amount_surrounded_by_text(self):
        (result,) = classify("Att betala 100 00 8 kr")
        assert result.raw_value == "100 00 8"
        assert result.amount == 100.0
        assert result.is_valid is True

    def test_single_digit_cents_group(self):
        (result,) = classify("1 5 3")
        assert result.formatted_value == "1,5"
        assert result.amount == 1.5

    def test_must_start_after_whitespace(self):
        assert classify("x100 00 8") == []

    def test_must_end_before_whitespace(self):
        assert classify("100 00 8x") == []

    def test_adjacent_amounts(self):
        results = classify("100 00 8 12345 13 8")
        assert [r.amount for r in results] == [100.0, 12345.13]

    def test_parse_failure_does_not_affect_validity(self):
        class UnparsableAmountNormalizer(AmountNormalizer):
            def parse(self, amount_str):
                return 0.0

        classifier = Classifier()
        classifier.amount_normalizer = UnparsableAmountNormalizer()

        (result,) = classifier.classify("100 00 8")
        assert result.amount == 0.0
        assert result.formatted_value == "100,00"
        assert result.is_valid is True

    def test_empty_kronor_group_keeps_leading_whitespace(self):
        (result,) = classify("Att  50 3")

        assert result.raw_value == " 50 3"
        assert result.formatted_value == "50,3"
        assert result.amount == 50.3
        assert result.is_valid == is_valid_modulus10("503")


class TestGiroAccount:
    """Giro account extraction"""

    def test_giro_scenario(self):
        results = classify("1234#56#")

        assert len(results) == 1
        result = results[0]
        assert result.kind is ExtractionKind.GIRO_ACCOUNT
        assert result.raw_value == "1234#56#"
        assert result.formatted_value == "1234"
        assert result.is_valid is True

    def test_giro_never_checksummed(self):
        (result,) = classify("99#99#")
        assert not is_valid_modulus10("999")
        assert result.is_valid is True

    def test_giro_inside_text(self):
        (result,) = classify("Bankgiro 5050#12# mottagare")
        assert result.formatted_value == "5050"


class TestClassify:
    """Multi-match classification"""

    def test_no_match(self):
        assert classify("hello world") == []

    def test_empty_fragment(self):
        assert classify("") == []

    def test_all_kinds_in_pattern_order(self):
        results = classify("5050#12# 100 00 8 1234566 #")

        assert [r.kind for r in results] == [
            ExtractionKind.REFERENCE,
            ExtractionKind.AMOUNT,
            ExtractionKind.GIRO_ACCOUNT,
        ]
        assert [r.formatted_value for r in results] == ["1234566", "100,00", "5050"]

    def test_idempotent(self):
        fragment = "100 00 8 1234566 # 5050#12#"
        assert classify(fragment) == classify(fragment)

    def test_formatted_values_have_no_separators(self):
        for result in classify("1234566 # 100 00 8 5050#12# 2139 #"):
            assert "#" not in result.formatted_value
            assert not any(c.isspace() for c in result.formatted_value)

    def test_to_dict(self):
        (result,) = classify("1234#56#")
        data = json.loads(result.to_json())
        assert data == {
            'kind': 'giro_account',
            'raw_value': '1234#56#',
            'formatted_value': '1234',
            'amount': 0.0,
            'is_valid': True
        }


class TestBestMatch:
    """Single best match mode"""

    def test_reference_wins_over_earlier_giro(self):
        result = best_match("1234#56# 1234566 #")
        assert result.kind is ExtractionKind.REFERENCE

    def test_undefined_when_nothing_matches(self):
        result = best_match("hello world")
        assert result.kind is ExtractionKind.UNDEFINED
        assert result.raw_value == "hello world"
        assert result.formatted_value == ""
        assert result.is_valid is False


class TestClassifierSettings:
    """Classifier construction"""

    def test_defaults_from_configuration(self):
        classifier = Classifier()
        assert classifier.reference_validator.enforce_length_control is False
        assert classifier.amount_validator.enforce_length_control is False

    def test_reference_length_control(self):
        classifier = Classifier(reference_length_control=True)

        (result,) = classifier.classify("100008 #")
        assert result.is_valid is False

        (result,) = classifier.classify("2139 #")
        assert result.is_valid is True
