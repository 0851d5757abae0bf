"""User-facing strings for the tap tempo console.

Catalogues are selected from the usual locale environment variables.
"""

import os

from pydantic import BaseModel, Field


class Messages(BaseModel):
    """Message catalogue. Placeholders use str.format syntax."""

    start: str = Field(description="Banner printed before reading keys")
    hit_enter: str = Field(description="Prompt shown after the first tap")
    tempo: str = Field(description="Tempo line, {bpm} is the formatted value")
    quit: str = Field(description="Farewell printed when leaving")
    version: str = Field(description="Version line, {version} is the version")
    cli_help: str
    cli_precision: str
    cli_reset: str
    cli_sample_size: str
    cli_version: str
    cli_verbose: str
    cli_log_file: str

    model_config = {"frozen": True, "extra": "forbid"}


ENGLISH = Messages(
    start="Hit enter key for each beat (q to quit).",
    hit_enter="[Hit enter key one more time to start bpm computation...]",
    tempo="Tempo: {bpm} bpm",
    quit="Bye Bye!",
    version="Version: {version}",
    cli_help="Display this help message.",
    cli_precision=(
        "Set the decimal precision of the tempo display. "
        "Default is {default} digits, max is {max} digits."
    ),
    cli_reset="Set the time in second to reset the computation. Default is {default} seconds.",
    cli_sample_size=(
        "Set the number of samples needed to compute the tempo. "
        "Default is {default} samples."
    ),
    cli_version="Display the version.",
    cli_verbose="Log debug information to stderr.",
    cli_log_file="Also write debug logs to this file.",
)

FRENCH = Messages(
    start="Appuyer sur la touche entrée en cadence (q pour quitter).",
    hit_enter="[Appuyer encore sur la touche entrée pour lancer le calcul du tempo...]",
    tempo="Tempo : {bpm} bpm",
    quit="Au revoir !",
    version="Version : {version}",
    cli_help="Affiche ce message d'aide.",
    cli_precision=(
        "Change le nombre de décimale du tempo à afficher. "
        "La valeur par défaut est {default} décimales, le maximum est {max} décimales."
    ),
    cli_reset=(
        "Change le temps en seconde de remise à zéro du calcul. "
        "La valeur par défaut est {default} secondes."
    ),
    cli_sample_size=(
        "Change le nombre d'échantillons nécessaires au calcul du tempo. "
        "La valeur par défaut est {default} échantillons."
    ),
    cli_version="Affiche la version.",
    cli_verbose="Affiche les traces de débogage sur la sortie d'erreur.",
    cli_log_file="Écrit aussi les traces de débogage dans ce fichier.",
)

CATALOGUES: dict[str, Messages] = {
    "en": ENGLISH,
    "fr": FRENCH,
}


def detect_language() -> str:
    """Return the two-letter language code from LC_ALL, LC_MESSAGES or LANG."""
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value:
            return value.split("_")[0].split(".")[0].lower()
    return "en"


def load_messages(language: str | None = None) -> Messages:
    """
    Get the message catalogue for a language.

    Args:
        language: Two-letter code, detected from the environment if None

    Returns:
        The matching catalogue, English when the language is unknown
    """
    language = language or detect_language()
    return CATALOGUES.get(language, ENGLISH)
