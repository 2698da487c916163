"""TreeCalc: '+ - * /' calculator engine built on a binary expression tree.

Usage:
    python -m TreeCalc eval "1+2*3"     # = 7
    python -m TreeCalc tree "8-3-2"     # show the tree
    python -m TreeCalc repl             # interactive
"""
