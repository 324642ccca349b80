"""Shared type definitions for simpledot.

Enums used across the grammar, the IR and the error reporting.
"""

from __future__ import annotations

from enum import Enum, auto


class GraphKind(Enum):
    Directed = auto()  # digraph
    Undirected = auto()  # graph


class AttributeKind(Enum):
    Graph = auto()
    Node = auto()
    Edge = auto()


class Style(Enum):
    Dashed = "dashed"
    Dotted = "dotted"
    Solid = "solid"
    Invis = "invis"
    Bold = "bold"
    Tapered = "tapered"
    Filled = "filled"
    Striped = "striped"
    Wedged = "wedged"
    Diagonals = "diagonals"
    Rounded = "rounded"


class Shape(Enum):
    # only polygon shapes are declared
    Box = "box"
    Polygon = "polygon"
    Ellipse = "ellipse"
    Oval = "oval"
    Circle = "circle"
    Point = "point"
    Egg = "egg"
    Triangle = "triangle"
    Plaintext = "plaintext"
    Plain = "plain"
    Diamond = "diamond"
    Trapezium = "trapezium"
    Parallelogram = "parallelogram"
    House = "house"
    Pentagon = "pentagon"
    Hexagon = "hexagon"
    Septagon = "septagon"
    Octagon = "octagon"
    DoubleCircle = "doublecircle"
    DoubleOctagon = "doubleoctagon"
    TripleOctagon = "tripleoctagon"
    InvTriangle = "invtriangle"
    InvTrapezium = "invtrapezium"
    InvHouse = "invhouse"
    MDiamond = "Mdiamond"
    MSquare = "Msquare"
    MCircle = "Mcircle"
    Rect = "rect"
    Rectangle = "rectangle"
    Square = "square"
    Star = "star"
    None_ = "none"
    Underline = "underline"
    Cylinder = "cylinder"
    Note = "note"
    Tab = "tab"
    Folder = "folder"
    Box3d = "box3d"
    Component = "component"
    Promoter = "promoter"
    Cds = "cds"
    Terminator = "terminator"
    Utr = "utr"
    PrimerSite = "primersite"
    RestrictionSite = "restrictionsite"
    FivePOverhang = "fivepoverhang"
    ThreePOverhang = "threepoverhang"
    NoOverhang = "noverhang"
    Assembly = "assembly"
    Signature = "signature"
    Insulator = "insulator"
    Ribosite = "ribosite"
    RnaStab = "rnastab"
    ProteaseSite = "proteasesite"
    ProteinStab = "proteinstab"
    RPromoter = "rpromoter"
    RArrow = "rarrow"
    LArrow = "larrow"
    LPromoter = "lpromoter"


class ErrorKind(Enum):
    """What a single failed grammar attempt was looking for."""

    Tag = auto()  # a literal keyword or operator
    Char = auto()  # a single delimiter character
    Pattern = auto()  # a character class (letters, digits, ...)
    Keyword = auto()  # a reserved word used as an identifier
    Lookahead = auto()  # a negative lookahead matched
    Alt = auto()  # every branch of an ordered choice failed
    Many1 = auto()  # a one-or-more repetition matched nothing
    Eof = auto()  # input ended inside a token
