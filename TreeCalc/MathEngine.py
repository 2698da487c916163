# MathEngine.py
"""""
Core calculation engine for TreeCalc.

Pipeline
--------
1) Tokenizer: splits a raw input string into alternating operand / operator tokens.
2) Tree builder: turns the flat token list into a binary expression tree.
   The root of every range is its rightmost operator with the lowest priority,
   which gives '*' and '/' precedence over '+' and '-' and left associativity.
3) Evaluator: folds the tree bottom-up into a float.
4) Formatter: renders results using the user preferences from config.json.

Only '+', '-', '*' and '/' are understood. There is no unary minus in the
grammar: an empty operand slot counts as 0, so "-5" is read as "0-5".
"""""

import math
import re
from enum import Enum

from . import config_manager as config_manager
from . import error as E

# Debug toggle for optional prints in this module
debug = False

# An operator directly preceded by another operator gets this priority, so it
# is never picked as a split point while a real binary operator is available.
UNARY_PRIORITY = 3

# Plain ASCII decimal literal, optionally padded with spaces: "12", "3.", ".5", "1e3"
DECIMAL_LITERAL = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)


# -----------------------------
# Operators
# -----------------------------

class Operator(Enum):
    """The four supported binary operators, keyed by their symbol."""
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def precedence(self):
        """1 for '+'/'-', 2 for '*'/'/'. Lower numbers bind looser."""
        if self is Operator.ADD or self is Operator.SUB:
            return 1
        return 2

    def combine(self, left_value, right_value):
        """Apply this operator to two floats."""
        if self is Operator.ADD:
            return left_value + right_value
        elif self is Operator.SUB:
            return left_value - right_value
        elif self is Operator.MUL:
            return left_value * right_value
        else:
            return divide(left_value, right_value)


# Symbol -> Operator, in '+', '-', '*', '/' order
OPERATORS = {op.value: op for op in Operator}


def divide(left_value, right_value):
    """IEEE-754 division: x/0 gives a signed infinity and 0/0 gives nan, never an exception."""
    if right_value == 0:
        if left_value == 0 or math.isnan(left_value):
            return math.nan
        # Sign of the zero matters: 1/-0.0 is -inf
        return math.copysign(math.inf, left_value) * math.copysign(1.0, right_value)
    return left_value / right_value


def is_operator(token):
    """Return True if token is exactly one of the four operator characters."""
    return token in OPERATORS


def get_priority(token, pre_token):
    """Effective priority of an operator token (1 to 3); -1 for non-operators.

    pre_token is the token right before it in the current range, or None.
    """
    if not is_operator(token):
        return -1
    if pre_token is not None and is_operator(pre_token):
        return UNARY_PRIORITY
    return OPERATORS[token].precedence


# -----------------------------
# Tree node
# -----------------------------

class BinaryNode:
    """One node of the expression tree.

    Operator nodes always carry both children; operand nodes and the empty
    node (implicit zero) carry none.
    """
    def __init__(self, value, left=None, right=None):
        self.value = value
        self.left = left
        self.right = right

    def is_leaf(self):
        return not is_operator(self.value)

    def debug_print(self):
        """Print the tree pre-order, one value per line."""
        print(self.value)
        if self.left is not None:
            self.left.debug_print()
        if self.right is not None:
            self.right.debug_print()

    def __repr__(self):
        if self.is_leaf():
            return f"BinaryNode({self.value!r})"
        return f"BinaryNode({self.value!r}, left={self.left}, right={self.right})"


# -----------------------------
# Tokenizer
# -----------------------------

def tokenize(text):
    """Split text into operand and operator tokens.

    Purely lexical: consecutive operators, a leading operator or garbage
    operands all pass through and are dealt with later.
    """
    tokens = []
    last_position = 0

    for i, current_char in enumerate(text):
        if is_operator(current_char):
            if last_position != i:
                tokens.append(text[last_position:i])
            tokens.append(current_char)
            last_position = i + 1

    # Whatever is left after the last operator is the final operand
    if last_position != len(text):
        tokens.append(text[last_position:])

    return tuple(tokens)


# -----------------------------
# Tree builder
# -----------------------------

def build(tokens, start=0, end=None):
    """Build the expression tree for tokens[start:end].

    The range is scanned right to left and the first operator reaching the
    lowest priority (strict '<') becomes the root, i.e. the rightmost one.
    Both sides are then built the same way. An empty range yields an empty
    leaf, which evaluates to 0.
    """
    if end is None:
        end = len(tokens)
    if start >= end:
        return BinaryNode("")

    found_index = None
    found_priority = UNARY_PRIORITY + 1

    for index in range(end - 1, start - 1, -1):
        token = tokens[index]
        if not is_operator(token):
            continue

        # Only look back inside the current range
        pre_token = tokens[index - 1] if index > start else None
        priority = get_priority(token, pre_token)
        if priority < found_priority:
            found_priority = priority
            found_index = index

    if found_index is None:
        return BinaryNode(tokens[start])

    left_node = build(tokens, start, found_index)
    right_node = build(tokens, found_index + 1, end)
    return BinaryNode(tokens[found_index], left_node, right_node)


# -----------------------------
# Evaluator
# -----------------------------

def parse_number(token):
    """Parse an operand token as float; raise NumberFormatError otherwise."""
    # float() alone would also take "nan", "inf", "1_000" and non-ASCII digits
    if not DECIMAL_LITERAL.fullmatch(token):
        raise E.NumberFormatError(f"Invalid number: {token!r}", token=token)
    return float(token)


def evaluate(node):
    """Recursively evaluate a tree built by build()."""
    value = node.value

    if value == "":
        return 0.0

    if is_operator(value):
        left_value = evaluate(node.left)
        right_value = evaluate(node.right)
        return OPERATORS[value].combine(left_value, right_value)

    return parse_number(value)


class Expression:
    """A parsed expression string: the text, its tokens and its tree."""
    def __init__(self, expression, debug_output=None):
        self.expression = expression
        self.tokens = tokenize(expression)
        self.root = build(self.tokens)

        if debug_output is None:
            debug_output = debug
        if debug_output:
            print(list(self.tokens))
            self.root.debug_print()

    def evaluation(self):
        """Return the value of the expression as float."""
        return evaluate(self.root)

    def __repr__(self):
        return f"Expression({self.expression!r})"


def evaluate_expression(text: str) -> float:
    """Tokenize, build and evaluate text in one go.

    Raises NumberFormatError if an operand is not a number. Division by zero
    returns inf or nan instead of raising.
    """
    return Expression(text).evaluation()


# -----------------------------
# Input helpers for front-ends
# -----------------------------

def trim_trailing_operator(text):
    """Drop one operator at the end of text, e.g. "1+" -> "1"."""
    if text and is_operator(text[-1]):
        return text[:-1]
    return text


def last_token(text):
    """Return the token being typed at the end of text.

    That is the text after the last operator, or the operator itself when
    text ends with one, or all of text when it holds no operator.
    """
    for i in range(len(text) - 1, -1, -1):
        if is_operator(text[i]):
            if i == len(text) - 1:
                return text[i:]
            return text[i + 1:]
    return text


# -----------------------------
# Result formatting
# -----------------------------

def _render(number):
    # Integral values print without ".0" as long as float still holds every digit
    if number.is_integer() and abs(number) < 1e16:
        return str(int(number))
    return repr(number)


def cleanup(ergebnis, decimal_places):
    """Format a float result for display.

    Returns:
        (rendered_value, rounding_flag)
    where rounding_flag tells whether rounding to decimal_places changed the value.
    """
    if math.isnan(ergebnis):
        return "nan", False
    if math.isinf(ergebnis):
        return ("inf" if ergebnis > 0 else "-inf"), False

    if ergebnis.is_integer():
        return _render(ergebnis), False

    gerundetes_ergebnis = round(ergebnis, decimal_places)
    rounding = gerundetes_ergebnis != ergebnis
    return _render(gerundetes_ergebnis), rounding


# -----------------------------
# Public entry point
# -----------------------------

def too_deep_error(problem):
    """CalculationError 3032 for a tree deeper than the interpreter recursion limit."""
    return E.CalculationError(
        message="Expression nested too deeply.",
        code="3032",
        equation=problem
    )


def calculate(problem, settings=None):
    """Main API for front-ends: trim -> evaluate -> format -> render string."""
    if settings is None:
        settings = config_manager.load_setting_value("all")
    else:
        settings = {**config_manager.DEFAULT_SETTINGS, **settings}

    try:
        if settings["trim_trailing_operator"]:
            problem_to_solve = trim_trailing_operator(problem)
        else:
            problem_to_solve = problem

        ergebnis = Expression(problem_to_solve, debug_output=settings["debug"]).evaluation()
        ausgabe_string, rounding = cleanup(ergebnis, settings["decimal_places"])

        ungefaehr_zeichen = "\u2248"  # "≈"
        if rounding:
            return f"{ungefaehr_zeichen} {ausgabe_string}"
        return f"= {ausgabe_string}"

    # Re-raise our domain errors after attaching the source equation
    except E.MathError as e:
        e.equation = problem
        raise e
    # One recursion level per operator on the left spine
    except RecursionError as e:
        raise too_deep_error(problem) from e
    # Convert unexpected Python exceptions to our unified error type
    except Exception as e:
        raise E.MathError(message=str(e).strip(), code="9999", equation=problem) from e
