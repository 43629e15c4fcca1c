r"""Call-by-value interpreter for lambda calculus with integers, addition and conditionals, using de Bruijn indices.

Basic program flow:
    1. Parser: reads a prefix-notation program one character at a time and builds a term tree
        - For grammar rules, see dblc/pure/term.py
    2. Evaluator: reduces the term under an environment to a value (a number or a closure)
        - Terms, values and environment cells are all allocated from fixed-size pools, see dblc/memory/arena.py
    3. Renderer: str() of a term gives its canonical prefix form, str() of a value its printed result

For example, "@ \ $0 4" applies the identity function to 4 and evaluates to 4.
"""
