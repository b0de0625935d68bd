"""
Static lookup tables for Latin-to-Gujarati transliteration.

Tables are ordered: the engine relies on insertion order to break ties
between keys of equal length.
"""

# Gujarati Unicode block
GUJARATI_BLOCK_START = 0x0A80
GUJARATI_BLOCK_END = 0x0AFF

VIRAMA = "્"

ENGLISH_TO_GUJARATI = {
    # Vowels
    "a": "અ", "aa": "આ", "i": "ઇ", "ii": "ઈ", "u": "ઉ", "uu": "ઊ",
    "e": "એ", "ai": "ઐ", "o": "ઓ", "au": "ઔ",

    # Consonants with inherent vowel
    "ka": "ક", "kha": "ખ", "ga": "ગ", "gha": "ઘ", "nga": "ઙ",
    "cha": "ચ", "chha": "છ", "ja": "જ", "jha": "ઝ", "nja": "ઞ",
    "ta": "ટ", "tha": "ઠ", "da": "ડ", "dha": "ઢ", "na": "ણ",
    "pa": "પ", "pha": "ફ", "ba": "બ", "bha": "ભ", "ma": "મ",
    "ya": "ય", "ra": "ર", "la": "લ", "va": "વ", "sha": "શ",
    "sa": "સ", "ha": "હ", "ksha": "ક્ષ", "tra": "ત્ર", "gya": "જ્ઞ",

    # Bare consonants (virama, no vowel)
    "k": "ક્", "kh": "ખ્", "g": "ગ્", "gh": "ઘ્",
    "ch": "ચ્", "j": "જ્", "jh": "ઝ્",
    "t": "ત્", "th": "થ્", "d": "દ્", "dh": "ધ્", "n": "ન્",
    "p": "પ્", "ph": "ફ્", "b": "બ્", "bh": "ભ્", "m": "મ્",
    "y": "ય્", "r": "ર્", "l": "લ્", "v": "વ્",
    "sh": "શ્", "s": "સ્", "h": "હ્",

    # Numbers
    "0": "૦", "1": "૧", "2": "૨", "3": "૩", "4": "૪",
    "5": "૫", "6": "૬", "7": "૭", "8": "૮", "9": "૯",
}

# Whole-word overrides for names and places the character table mangles
COMMON_NAME_MAPPINGS = {
    "amit": "અમિત",
    "raj": "રાજ",
    "shah": "શાહ",
    "patel": "પટેલ",
    "modi": "મોદી",
    "bhavnagar": "ભાવનગર",
    "ahmedabad": "અમદાવાદ",
    "surat": "સુરત",
    "rajkot": "રાજકોટ",
    "vadodara": "વડોદરા",
    "gandhinagar": "ગાંધીનગર",
    "gujarat": "ગુજરાત",
    "india": "ભારત",
}

GUJARATI_NUMERALS = {str(digit): chr(0x0AE6 + digit) for digit in range(10)}
