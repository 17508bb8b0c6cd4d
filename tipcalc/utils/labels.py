"""
Tip Calculator Labels
Display strings for the tip screen, keyed by language.
"""

from typing import Dict

DEFAULT_LANGUAGE = 'en'

LABELS: Dict[str, Dict[str, str]] = {
    'en': {
        'calculate_tip': 'Calculate Tip',
        'bill_amount': 'Bill Amount',
        'tip_percent': 'Tip Percentage',
        'custom_tip_amount': 'Custom Tip Amount',
        'round_tip': 'Round up tip?',
        'tip_amount': 'Tip Amount: {amount}',
        'total_amount': 'Total: {amount}',
    },
    'es': {
        'calculate_tip': 'Calcular propina',
        'bill_amount': 'Importe de la cuenta',
        'tip_percent': 'Porcentaje de propina',
        'custom_tip_amount': 'Propina personalizada',
        'round_tip': '¿Redondear propina?',
        'tip_amount': 'Propina: {amount}',
        'total_amount': 'Total: {amount}',
    },
}


def _language(locale: str) -> str:
    return (locale or DEFAULT_LANGUAGE).replace('-', '_').split('_')[0].lower()


def get_labels(locale: str) -> Dict[str, str]:
    """All labels for a locale, English filling any gaps."""
    labels = dict(LABELS[DEFAULT_LANGUAGE])
    labels.update(LABELS.get(_language(locale), {}))
    return labels


def get_label(key: str, locale: str, **params) -> str:
    """
    Look up one label and fill its placeholders.

    Raises:
        KeyError: key is not a known label
    """
    template = get_labels(locale)[key]
    return template.format(**params) if params else template
