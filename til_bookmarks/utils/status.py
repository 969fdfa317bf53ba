from typing import Any, Dict

# How long a status message stays visible before it dismisses itself.
DISMISS_AFTER_MS = {
    'success': 2500,
    'error': 4000,
}


def status_message(message: str, tone: str = 'idle') -> Dict[str, Any]:
    dismiss_after = DISMISS_AFTER_MS.get(tone) if message else None
    return {'message': message, 'tone': tone, 'dismissAfterMs': dismiss_after}


def error_response(message: str, code: int):
    return {'status': status_message(message, 'error')}, code
