"""Rendering engine shared by every locale.

Pipeline:
    segmenter -> segment builders -> scale resolver -> assembler

Ordinal, currency and decimal rendering reuse the cardinal pipeline.
"""

from numwords.engine.assembler import ConjunctionPolicy, ConnectorRule, Piece
from numwords.engine.cardinal import CardinalStrategy, HundredPairingCardinal, RespacedCardinal
from numwords.engine.currency import CurrencyStyle, CurrencyUnit, UnitPosition
from numwords.engine.decimal import FractionStyle, render_fraction, render_magnitude
from numwords.engine.ordinal import (
    ComponentOrdinal,
    OrdinalStrategy,
    OrdinalTables,
    PrefixOrdinal,
    SuffixOrdinal,
    TerminalWordOrdinal,
)
from numwords.engine.plural import PluralCategory, PluralForms, PluralRules, get_plural_rule
from numwords.engine.scales import NumeralPolicy, OverflowPolicy, ScaleLadder, ScaleWord, ladder_of
from numwords.engine.segment import PositionalBuilder, SegmentBuilder, SegmentContext, TripletBuilder
from numwords.engine.segmenter import group_ceiling, level_weight, reconstruct, segment

__all__ = [
    # Segmenter
    "segment",
    "reconstruct",
    "group_ceiling",
    "level_weight",
    # Segment builders
    "SegmentBuilder",
    "SegmentContext",
    "TripletBuilder",
    "PositionalBuilder",
    # Scales and plurals
    "ScaleWord",
    "ScaleLadder",
    "NumeralPolicy",
    "OverflowPolicy",
    "ladder_of",
    "PluralCategory",
    "PluralForms",
    "PluralRules",
    "get_plural_rule",
    # Assembler
    "Piece",
    "ConnectorRule",
    "ConjunctionPolicy",
    # Strategies
    "CardinalStrategy",
    "HundredPairingCardinal",
    "RespacedCardinal",
    "OrdinalStrategy",
    "OrdinalTables",
    "TerminalWordOrdinal",
    "ComponentOrdinal",
    "PrefixOrdinal",
    "SuffixOrdinal",
    "CurrencyStyle",
    "CurrencyUnit",
    "UnitPosition",
    "FractionStyle",
    "render_fraction",
    "render_magnitude",
]
