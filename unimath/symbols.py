"""Escape-word tables: LaTeX-style codes → Unicode math characters."""
import string

# Direct symbol codes (full token → replacement)
_SYMBOLS = {
    # Greek, lowercase
    '\\alpha': 'α', '\\beta': 'β', '\\gamma': 'γ', '\\delta': 'δ',
    '\\epsilon': 'ϵ', '\\varepsilon': 'ε', '\\zeta': 'ζ', '\\eta': 'η',
    '\\theta': 'θ', '\\vartheta': 'ϑ', '\\iota': 'ι', '\\kappa': 'κ',
    '\\varkappa': 'ϰ', '\\lambda': 'λ', '\\mu': 'μ', '\\nu': 'ν',
    '\\xi': 'ξ', '\\omicron': 'ο', '\\pi': 'π', '\\varpi': 'ϖ',
    '\\rho': 'ρ', '\\varrho': 'ϱ', '\\sigma': 'σ', '\\varsigma': 'ς',
    '\\tau': 'τ', '\\upsilon': 'υ', '\\phi': 'ϕ', '\\varphi': 'φ',
    '\\chi': 'χ', '\\psi': 'ψ', '\\omega': 'ω',
    # Greek, uppercase
    '\\Gamma': 'Γ', '\\Delta': 'Δ', '\\Theta': 'Θ', '\\Lambda': 'Λ',
    '\\Xi': 'Ξ', '\\Pi': 'Π', '\\Sigma': 'Σ', '\\Upsilon': 'Υ',
    '\\Phi': 'Φ', '\\Psi': 'Ψ', '\\Omega': 'Ω',
    # Binary operators
    '\\pm': '±', '\\mp': '∓', '\\times': '×', '\\div': '÷',
    '\\cdot': '⋅', '\\ast': '∗', '\\star': '⋆', '\\circ': '∘',
    '\\bullet': '∙', '\\oplus': '⊕', '\\ominus': '⊖', '\\otimes': '⊗',
    '\\oslash': '⊘', '\\odot': '⊙', '\\cap': '∩', '\\cup': '∪',
    '\\sqcap': '⊓', '\\sqcup': '⊔', '\\uplus': '⊎', '\\wedge': '∧',
    '\\land': '∧', '\\vee': '∨', '\\lor': '∨', '\\setminus': '∖',
    '\\wr': '≀', '\\dagger': '†', '\\ddagger': '‡', '\\amalg': '⨿',
    # Relations
    '\\le': '≤', '\\leq': '≤', '\\ge': '≥', '\\geq': '≥',
    '\\ne': '≠', '\\neq': '≠', '\\ll': '≪', '\\gg': '≫',
    '\\approx': '≈', '\\sim': '∼', '\\simeq': '≃', '\\cong': '≅',
    '\\equiv': '≡', '\\propto': '∝', '\\prec': '≺', '\\succ': '≻',
    '\\preceq': '⪯', '\\succeq': '⪰', '\\subset': '⊂', '\\supset': '⊃',
    '\\subseteq': '⊆', '\\supseteq': '⊇', '\\in': '∈', '\\notin': '∉',
    '\\ni': '∋', '\\perp': '⊥', '\\parallel': '∥', '\\mid': '∣',
    '\\models': '⊨', '\\vdash': '⊢', '\\dashv': '⊣', '\\asymp': '≍',
    '\\doteq': '≐', '\\coloneq': '≔', '\\triangleq': '≜',
    # Arrows
    '\\to': '→', '\\rightarrow': '→', '\\leftarrow': '←', '\\gets': '←',
    '\\leftrightarrow': '↔', '\\uparrow': '↑', '\\downarrow': '↓',
    '\\updownarrow': '↕', '\\Rightarrow': '⇒', '\\Leftarrow': '⇐',
    '\\Leftrightarrow': '⇔', '\\Uparrow': '⇑', '\\Downarrow': '⇓',
    '\\implies': '⟹', '\\impliedby': '⟸', '\\iff': '⟺',
    '\\mapsto': '↦', '\\longmapsto': '⟼', '\\longrightarrow': '⟶',
    '\\longleftarrow': '⟵', '\\hookrightarrow': '↪', '\\hookleftarrow': '↩',
    '\\nearrow': '↗', '\\searrow': '↘', '\\nwarrow': '↖', '\\swarrow': '↙',
    '\\rightharpoonup': '⇀', '\\rightleftharpoons': '⇌',
    '\\leftrightharpoons': '⇋',
    # Logic and sets
    '\\forall': '∀', '\\exists': '∃', '\\nexists': '∄', '\\neg': '¬',
    '\\lnot': '¬', '\\emptyset': '∅', '\\varnothing': '⌀', '\\top': '⊤',
    '\\bot': '⊥', '\\therefore': '∴', '\\because': '∵',
    # Big operators
    '\\sum': '∑', '\\prod': '∏', '\\coprod': '∐', '\\int': '∫',
    '\\iint': '∬', '\\iiint': '∭', '\\oint': '∮', '\\bigcap': '⋂',
    '\\bigcup': '⋃', '\\bigvee': '⋁', '\\bigwedge': '⋀',
    '\\bigoplus': '⨁', '\\bigotimes': '⨂',
    # Delimiters
    '\\langle': '⟨', '\\rangle': '⟩', '\\lceil': '⌈', '\\rceil': '⌉',
    '\\lfloor': '⌊', '\\rfloor': '⌋', '\\Vert': '‖',
    # Misc
    '\\infty': '∞', '\\partial': '∂', '\\nabla': '∇', '\\hbar': 'ℏ',
    '\\ell': 'ℓ', '\\aleph': 'ℵ', '\\beth': 'ℶ', '\\wp': '℘',
    '\\Re': 'ℜ', '\\Im': 'ℑ', '\\angle': '∠', '\\degree': '°',
    '\\prime': '′', '\\dprime': '″', '\\sqrt': '√', '\\cbrt': '∛',
    '\\cdots': '⋯', '\\ldots': '…', '\\vdots': '⋮', '\\ddots': '⋱',
    '\\qed': '∎', '\\checkmark': '✓', '\\square': '□', '\\triangle': '△',
    '\\diamond': '⋄', '\\S': '§', '\\P': '¶', '\\copyright': '©',
    '\\euro': '€', '\\pounds': '£',
    # Number sets
    '\\N': 'ℕ', '\\Z': 'ℤ', '\\Q': 'ℚ', '\\R': 'ℝ', '\\C': 'ℂ',
}

# Math alphabet prefix → display name
MATH_ALPHABETS = {
    '\\mbf': 'bold',
    '\\mit': 'italic',
    '\\mbfit': 'bold italic',
    '\\mscr': 'script',
    '\\mbfscr': 'bold script',
    '\\mfrak': 'fraktur',
    '\\mbffrak': 'bold fraktur',
    '\\Bbb': 'double-struck',
    '\\msans': 'sans-serif',
    '\\mbfsans': 'sans-serif bold',
    '\\mitsans': 'sans-serif italic',
    '\\mbfitsans': 'sans-serif bold italic',
    '\\mtt': 'monospace',
}

# prefix → (first capital, first small, first digit or None)
# Code points from the Mathematical Alphanumeric Symbols block (U+1D400).
_ALPHABET_STARTS = {
    '\\mbf': (0x1D400, 0x1D41A, 0x1D7CE),
    '\\mit': (0x1D434, 0x1D44E, None),
    '\\mbfit': (0x1D468, 0x1D482, None),
    '\\mscr': (0x1D49C, 0x1D4B6, None),
    '\\mbfscr': (0x1D4D0, 0x1D4EA, None),
    '\\mfrak': (0x1D504, 0x1D51E, None),
    '\\mbffrak': (0x1D56C, 0x1D586, None),
    '\\Bbb': (0x1D538, 0x1D552, 0x1D7D8),
    '\\msans': (0x1D5A0, 0x1D5BA, 0x1D7E2),
    '\\mbfsans': (0x1D5D4, 0x1D5EE, 0x1D7EC),
    '\\mitsans': (0x1D608, 0x1D622, None),
    '\\mbfitsans': (0x1D63C, 0x1D656, None),
    '\\mtt': (0x1D670, 0x1D68A, 0x1D7F6),
}

# Letters that predate the block live in Letterlike Symbols; the block
# leaves their slots unassigned.
_LETTERLIKE = {
    '\\mit': {'h': 'ℎ'},
    '\\mscr': {
        'B': 'ℬ', 'E': 'ℰ', 'F': 'ℱ', 'H': 'ℋ', 'I': 'ℐ', 'L': 'ℒ',
        'M': 'ℳ', 'R': 'ℛ', 'e': 'ℯ', 'g': 'ℊ', 'o': 'ℴ',
    },
    '\\mfrak': {'C': 'ℭ', 'H': 'ℌ', 'I': 'ℑ', 'R': 'ℜ', 'Z': 'ℨ'},
    '\\Bbb': {
        'C': 'ℂ', 'H': 'ℍ', 'N': 'ℕ', 'P': 'ℙ', 'Q': 'ℚ', 'R': 'ℝ',
        'Z': 'ℤ',
    },
}


def _alphabet(prefix: str) -> dict:
    """Build the per-character entries (``prefix + c``) for one math alphabet."""
    upper, lower, digits = _ALPHABET_STARTS[prefix]
    table = {}
    for i, c in enumerate(string.ascii_uppercase):
        table[prefix + c] = chr(upper + i)
    for i, c in enumerate(string.ascii_lowercase):
        table[prefix + c] = chr(lower + i)
    if digits is not None:
        for i, c in enumerate(string.digits):
            table[prefix + c] = chr(digits + i)
    for c, glyph in _LETTERLIKE.get(prefix, {}).items():
        table[prefix + c] = glyph
    return table


def _build_codes() -> dict:
    codes = dict(_SYMBOLS)
    for prefix in MATH_ALPHABETS:
        codes.update(_alphabet(prefix))
    return codes


# Primary table: every escape token known to the expander and completer
CODES = _build_codes()

# see: https://en.wikipedia.org/wiki/Unicode_subscripts_and_superscripts
SUPERSCRIPTS = {
    '0': '⁰', '1': '¹', '2': '²', '3': '³', '4': '⁴',
    '5': '⁵', '6': '⁶', '7': '⁷', '8': '⁸', '9': '⁹',
    '+': '⁺', '-': '⁻', '=': '⁼', '(': '⁽', ')': '⁾',
    'a': 'ᵃ', 'b': 'ᵇ', 'c': 'ᶜ', 'd': 'ᵈ', 'e': 'ᵉ', 'f': 'ᶠ',
    'g': 'ᵍ', 'h': 'ʰ', 'i': 'ⁱ', 'j': 'ʲ', 'k': 'ᵏ', 'l': 'ˡ',
    'm': 'ᵐ', 'n': 'ⁿ', 'o': 'ᴼ', 'p': 'ᵖ', 'r': 'ʳ', 's': 'ˢ',
    't': 'ᵗ', 'u': 'ᶸ', 'v': 'ᵛ', 'w': 'ʷ', 'x': 'ˣ', 'y': 'ʸ',
    'A': 'ᴬ', 'B': 'ᴮ', 'D': 'ᴰ', 'E': 'ᴱ', 'G': 'ᴳ', 'H': 'ᴴ',
    'I': 'ᴵ', 'J': 'ᴶ', 'K': 'ᴷ', 'L': 'ᴸ', 'M': 'ᴹ', 'N': 'ᴺ',
    'P': 'ᴾ', 'R': 'ᴿ', 'T': 'ᵀ', 'U': 'ᵁ', 'V': 'ⱽ', 'W': 'ᵂ',
    'Z': 'ᶻ',
    'α': 'ᵅ', 'β': 'ᵝ', 'γ': 'ᵞ', 'δ': 'ᵟ', 'θ': 'ᶿ', 'ϕ': 'ᵠ',
    'χ': 'ᵡ',
}

SUBSCRIPTS = {
    '0': '₀', '1': '₁', '2': '₂', '3': '₃', '4': '₄',
    '5': '₅', '6': '₆', '7': '₇', '8': '₈', '9': '₉',
    '+': '₊', '-': '₋', '=': '₌', '(': '₍', ')': '₎',
    'a': 'ₐ', 'e': 'ₑ', 'h': 'ₕ', 'i': 'ᵢ', 'j': 'ⱼ', 'k': 'ₖ',
    'l': 'ₗ', 'm': 'ₘ', 'n': 'ₙ', 'o': 'ₒ', 'p': 'ₚ', 'r': 'ᵣ',
    's': 'ₛ', 't': 'ₜ', 'u': 'ᵤ', 'v': 'ᵥ', 'x': 'ₓ',
    'β': 'ᵦ', 'ρ': 'ᵨ', 'ϕ': 'ᵩ', 'χ': 'ᵪ',
}


def is_escape(text: str) -> bool:
    """True if text looks like an escape token (starts with a backslash)."""
    return bool(text) and text[0] == '\\'
