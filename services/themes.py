"""
Presentation themes for the estimator forms and generated PDFs.

Each theme carries screen colours, fonts, spacing and the three colours the
PDF renderers use (accent, header background, table stripe).
"""

from typing import Dict, Any, List

THEME_STORAGE_KEY = 'estimaitor-theme'
DEFAULT_THEME_ID = 'minimalist'

THEMES: Dict[str, Dict[str, Any]] = {
    'minimalist': {
        'id': 'minimalist',
        'name': 'Modern Minimalist',
        'description': 'Clean, uncluttered design with subtle accents',
        'colors': {
            'primary': '#64748b',
            'secondary': '#f8fafc',
            'accent': '#0f766e',
            'background': '#ffffff',
            'surface': '#f8fafc',
            'text': '#1e293b',
            'textSecondary': '#64748b',
            'border': '#e2e8f0',
            'success': '#059669',
            'warning': '#d97706',
            'error': '#dc2626',
        },
        'fonts': {
            'primary': 'Inter, system-ui, sans-serif',
            'secondary': 'Inter, system-ui, sans-serif',
        },
        'spacing': {'compact': False, 'borderRadius': '0.375rem'},
        'pdf': {
            'accentColor': '#0f766e',
            'headerBackground': '#f8fafc',
            'tableStripe': '#f1f5f9',
        },
    },
    'corporate': {
        'id': 'corporate',
        'name': 'Professional Corporate',
        'description': 'Structured, trustworthy business appearance',
        'colors': {
            'primary': '#1e40af',
            'secondary': '#f3f4f6',
            'accent': '#374151',
            'background': '#ffffff',
            'surface': '#f9fafb',
            'text': '#111827',
            'textSecondary': '#6b7280',
            'border': '#d1d5db',
            'success': '#065f46',
            'warning': '#92400e',
            'error': '#991b1b',
        },
        'fonts': {
            'primary': 'system-ui, -apple-system, sans-serif',
            'secondary': 'Georgia, serif',
        },
        'spacing': {'compact': False, 'borderRadius': '0.25rem'},
        'pdf': {
            'accentColor': '#1e40af',
            'headerBackground': '#f3f4f6',
            'tableStripe': '#f9fafb',
        },
    },
    'visual': {
        'id': 'visual',
        'name': 'Visual Impact',
        'description': 'Dynamic, engaging design with vibrant elements',
        'colors': {
            'primary': '#2563eb',
            'secondary': '#f0f9ff',
            'accent': '#ea580c',
            'background': '#ffffff',
            'surface': '#f0f9ff',
            'text': '#0c4a6e',
            'textSecondary': '#0369a1',
            'border': '#bae6fd',
            'success': '#16a34a',
            'warning': '#eab308',
            'error': '#e11d48',
        },
        'fonts': {
            'primary': 'Poppins, system-ui, sans-serif',
            'secondary': 'Poppins, system-ui, sans-serif',
        },
        'spacing': {'compact': False, 'borderRadius': '0.75rem'},
        'pdf': {
            'accentColor': '#2563eb',
            'headerBackground': '#f0f9ff',
            'tableStripe': '#e0f2fe',
        },
    },
    'service': {
        'id': 'service',
        'name': 'Service-Focused',
        'description': 'Clear service presentation with organized sections',
        'colors': {
            'primary': '#059669',
            'secondary': '#f0fdf4',
            'accent': '#0891b2',
            'background': '#ffffff',
            'surface': '#f0fdf4',
            'text': '#064e3b',
            'textSecondary': '#047857',
            'border': '#bbf7d0',
            'success': '#22c55e',
            'warning': '#f59e0b',
            'error': '#ef4444',
        },
        'fonts': {
            'primary': 'system-ui, -apple-system, sans-serif',
            'secondary': 'system-ui, -apple-system, sans-serif',
        },
        'spacing': {'compact': False, 'borderRadius': '0.5rem'},
        'pdf': {
            'accentColor': '#059669',
            'headerBackground': '#f0fdf4',
            'tableStripe': '#ecfdf5',
        },
    },
    'data': {
        'id': 'data',
        'name': 'Data-Driven',
        'description': 'Analytical presentation with clear visualizations',
        'colors': {
            'primary': '#7c3aed',
            'secondary': '#faf5ff',
            'accent': '#0d9488',
            'background': '#ffffff',
            'surface': '#faf5ff',
            'text': '#581c87',
            'textSecondary': '#7c2d92',
            'border': '#e9d5ff',
            'success': '#10b981',
            'warning': '#f59e0b',
            'error': '#f43f5e',
        },
        'fonts': {
            'primary': 'system-ui, -apple-system, monospace',
            'secondary': 'system-ui, -apple-system, sans-serif',
        },
        'spacing': {'compact': True, 'borderRadius': '0.25rem'},
        'pdf': {
            'accentColor': '#7c3aed',
            'headerBackground': '#faf5ff',
            'tableStripe': '#f3e8ff',
        },
    },
}


def is_known_theme(theme_id) -> bool:
    return isinstance(theme_id, str) and theme_id in THEMES


def get_theme(theme_id=None) -> Dict[str, Any]:
    """Theme by id; unknown or missing ids get the default theme"""
    return THEMES[theme_id] if is_known_theme(theme_id) else THEMES[DEFAULT_THEME_ID]


def list_themes() -> List[Dict[str, str]]:
    return [
        {'id': theme['id'], 'name': theme['name'], 'description': theme['description']}
        for theme in THEMES.values()
    ]


def get_css_variables(theme_id=None) -> Dict[str, str]:
    """CSS custom properties the front end applies to the document root"""
    theme = get_theme(theme_id)
    variables = {f"--color-{key}": value for key, value in theme['colors'].items()}
    variables['--font-primary'] = theme['fonts']['primary']
    variables['--font-secondary'] = theme['fonts']['secondary']
    variables['--border-radius'] = theme['spacing']['borderRadius']
    variables['--spacing-compact'] = '0.5' if theme['spacing']['compact'] else '1'
    return variables
