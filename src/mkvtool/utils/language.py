"""Language code normalization for command line input.

Matroska stores languages as ISO 639-2/B codes (e.g., "eng", "fre"), which is
what mkvmerge reports. Users often type two-letter codes or language names,
so these are mapped before matching.
"""

from mkvtool.core.selector import DEFAULT_LANGUAGE_TOKEN

# ISO 639-1 (2-letter) to ISO 639-2/B (3-letter)
ISO_639_1_TO_639_2 = {
    "en": "eng",  # English
    "es": "spa",  # Spanish
    "fr": "fre",  # French
    "de": "ger",  # German
    "it": "ita",  # Italian
    "pt": "por",  # Portuguese
    "ru": "rus",  # Russian
    "ja": "jpn",  # Japanese
    "ko": "kor",  # Korean
    "zh": "chi",  # Chinese
    "ar": "ara",  # Arabic
    "hi": "hin",  # Hindi
    "nl": "dut",  # Dutch
    "pl": "pol",  # Polish
    "tr": "tur",  # Turkish
    "sv": "swe",  # Swedish
    "da": "dan",  # Danish
    "no": "nor",  # Norwegian
    "fi": "fin",  # Finnish
    "cs": "cze",  # Czech
    "hu": "hun",  # Hungarian
    "ro": "rum",  # Romanian
    "th": "tha",  # Thai
    "vi": "vie",  # Vietnamese
    "id": "ind",  # Indonesian
    "he": "heb",  # Hebrew
    "el": "gre",  # Greek
    "uk": "ukr",  # Ukrainian
    "ca": "cat",  # Catalan
    "sk": "slo",  # Slovak
    "hr": "hrv",  # Croatian
    "sr": "srp",  # Serbian
    "bg": "bul",  # Bulgarian
    "lt": "lit",  # Lithuanian
    "lv": "lav",  # Latvian
    "et": "est",  # Estonian
    "sl": "slv",  # Slovenian
    "fa": "per",  # Persian
    "ms": "may",  # Malay
}

LANGUAGE_NAME_TO_639_2 = {
    "english": "eng",
    "spanish": "spa",
    "french": "fre",
    "german": "ger",
    "italian": "ita",
    "portuguese": "por",
    "russian": "rus",
    "japanese": "jpn",
    "korean": "kor",
    "chinese": "chi",
    "arabic": "ara",
    "hindi": "hin",
    "dutch": "dut",
    "polish": "pol",
    "turkish": "tur",
    "swedish": "swe",
    "danish": "dan",
    "norwegian": "nor",
    "finnish": "fin",
    "czech": "cze",
    "hungarian": "hun",
    "romanian": "rum",
    "greek": "gre",
    "hebrew": "heb",
    "ukrainian": "ukr",
}


def normalize_language(code: str) -> str:
    """Normalize a user supplied language to a 3-letter ISO 639-2 code.

    The reserved "default" token and unknown values are returned lowercased
    but otherwise untouched.

    Args:
        code: Language code (2 or 3 letters), language name, or "default"

    Returns:
        Normalized language code
    """
    if not code:
        return code

    code_lower = code.strip().lower()
    if code_lower == DEFAULT_LANGUAGE_TOKEN:
        return code_lower
    if len(code_lower) == 2:
        return ISO_639_1_TO_639_2.get(code_lower, code_lower)
    return LANGUAGE_NAME_TO_639_2.get(code_lower, code_lower)


def normalize_languages(codes) -> list[str]:
    """Normalize a sequence of language codes, preserving order."""
    return [normalize_language(code) for code in codes]
