# app/state - Session state management
from .session import (
    LoadSettings,
    get_ids,
    get_model,
    set_model,
    get_selected_id,
    set_selected_id,
    get_settings,
    update_settings,
    get_results,
    set_results,
    clear_results,
    clear_all,
)

__all__ = [
    'LoadSettings',
    'get_ids',
    'get_model',
    'set_model',
    'get_selected_id',
    'set_selected_id',
    'get_settings',
    'update_settings',
    'get_results',
    'set_results',
    'clear_results',
    'clear_all',
]
