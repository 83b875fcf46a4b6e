# app/components - Reusable UI components
from .response_plot import render_response_plot
from .tree_editor import render_model_import, render_preset_picker, render_tree_editor

__all__ = [
    'render_response_plot',
    'render_preset_picker',
    'render_model_import',
    'render_tree_editor',
]
