"""
Unit tests for type classification.

What this tests:
---------------
1. Built-in types are tagged with the right kind
2. Rule ordering (final before collections, named tuples before tuples)
3. Per-type caching and cache invalidation
4. Global classifier singleton

Why this matters:
----------------
- The kind decides whether a value is a leaf, a collection or an object
- Classification happens once per type, so caching must be correct
"""

from collections import OrderedDict, deque
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import IntEnum
from fractions import Fraction
from pathlib import Path
from types import MappingProxyType
from uuid import uuid4

import pytest

from object_printing.classification import (
    FinalTypeRule,
    KindRule,
    MappingRule,
    NamedTupleRule,
    SequenceRule,
    TypeClassifier,
    TypeKind,
    get_default_classifier,
    get_global_classifier,
    reset_global_classifier,
)

from .models import Color, Node, Point, Record


class Level(IntEnum):
    LOW = 1


class CountingRule(KindRule):
    """Rule that records every type it is asked about."""

    kind = TypeKind.FINAL

    def __init__(self):
        self.calls = []

    def can_handle(self, tp):
        self.calls.append(tp)
        return tp is Record


class TestDefaultRules:
    """Test kinds assigned by the default classifier."""

    @pytest.mark.parametrize(
        "tp",
        [
            int,
            bool,
            float,
            complex,
            Decimal,
            Fraction,
            str,
            bytes,
            bytearray,
            datetime,
            date,
            time,
            timedelta,
            type(uuid4()),
            Color,
            Level,
            type(Path(".")),
        ],
    )
    def test_final_types(self, tp):
        """
        Test atomic types are final.

        What this tests:
        ---------------
        1. Numbers, text, temporal types, UUIDs, enums and paths are leaves
        2. Subclasses (bool, IntEnum, concrete Path classes) are leaves too

        Why this matters:
        ----------------
        - Leaves print their native text without traversal
        """
        assert get_default_classifier().classify(tp) is TypeKind.FINAL

    @pytest.mark.parametrize("tp", [list, tuple, set, frozenset, deque, range])
    def test_sequence_types(self, tp):
        assert get_default_classifier().classify(tp) is TypeKind.SEQUENCE

    @pytest.mark.parametrize("tp", [dict, OrderedDict, MappingProxyType])
    def test_mapping_types(self, tp):
        assert get_default_classifier().classify(tp) is TypeKind.MAPPING

    @pytest.mark.parametrize("tp", [Record, Node, object, Point])
    def test_compound_types(self, tp):
        """
        Test user classes and named tuples are compound.

        What this tests:
        ---------------
        1. Classes not claimed by any rule fall back to COMPOUND
        2. Named tuples are not treated as plain tuples

        Why this matters:
        ----------------
        - Named tuples read better as records with field names
        """
        assert get_default_classifier().classify(tp) is TypeKind.COMPOUND

    def test_classify_value(self):
        classifier = get_default_classifier()

        assert classifier.classify_value("x") is TypeKind.FINAL
        assert classifier.classify_value([1]) is TypeKind.SEQUENCE

    def test_collection_flag(self):
        assert TypeKind.SEQUENCE.is_collection
        assert TypeKind.MAPPING.is_collection
        assert not TypeKind.FINAL.is_collection
        assert not TypeKind.COMPOUND.is_collection

    def test_default_rule_order(self):
        rules = get_default_classifier().rules

        assert [type(rule) for rule in rules] == [
            FinalTypeRule,
            NamedTupleRule,
            MappingRule,
            SequenceRule,
        ]


class TestClassifierRegistry:
    """Test rule registration and caching."""

    def test_empty_classifier_tags_everything_compound(self):
        assert TypeClassifier().classify(int) is TypeKind.COMPOUND

    def test_first_matching_rule_wins(self):
        classifier = TypeClassifier()
        classifier.register(FinalTypeRule((Point,)))
        classifier.register(NamedTupleRule())

        assert classifier.classify(Point) is TypeKind.FINAL

    def test_result_cached_per_type(self):
        """
        Test rules are consulted once per type.

        What this tests:
        ---------------
        1. Second classification of the same type hits the cache
        2. Different types are still classified

        Why this matters:
        ----------------
        - Engine classifies every value it visits; it must stay cheap
        """
        rule = CountingRule()
        classifier = TypeClassifier()
        classifier.register(rule)

        assert classifier.classify(Record) is TypeKind.FINAL
        assert classifier.classify(Record) is TypeKind.FINAL
        assert classifier.classify(Node) is TypeKind.COMPOUND

        assert rule.calls == [Record, Node]

    def test_register_clears_cache(self):
        classifier = TypeClassifier()
        assert classifier.classify(Record) is TypeKind.COMPOUND

        classifier.register(FinalTypeRule((Record,)))

        assert classifier.classify(Record) is TypeKind.FINAL

    def test_rules_property_is_a_copy(self):
        classifier = get_default_classifier()

        classifier.rules.clear()

        assert len(classifier.rules) == 4

    def test_rule_repr(self):
        assert repr(NamedTupleRule()) == "NamedTupleRule(kind=COMPOUND)"
        assert repr(FinalTypeRule((int, str))) == "FinalTypeRule(int, str)"


class TestGlobalClassifier:
    """Test the process-wide default classifier."""

    def test_singleton(self):
        assert get_global_classifier() is get_global_classifier()

    def test_reset(self):
        first = get_global_classifier()

        reset_global_classifier()

        assert get_global_classifier() is not first
