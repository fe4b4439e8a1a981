"""
Scope of Work Templates
Per project type task lists inserted into quotes, work orders and purchase orders
"""

import logging
from typing import Dict, List

logger = logging.getLogger(__name__)

WINDOW_COUNT_PLACEHOLDER = '___WINDOW_COUNT___'

SCOPE_HEADER = 'Final Cleaning includes:'
SCOPE_HEADER_ES = 'La Limpieza Final incluye:'

FLOOR_TASK = 'Sweep/mop all hard surface floors'

SHARED_TASKS = [
    f'Clean interior/exterior windows ({WINDOW_COUNT_PLACEHOLDER} windows)',
    'Clean/sanitize bathrooms and ensure all fixtures are spotless',
    'Clean light fixtures and perform hi-lo dusting',
    'Clean and sanitize all door handles and high-touch surfaces',
    'Empty and clean all trash receptacles',
]

# Listed between the floor task and the shared tasks
SPECIFIC_TASKS: Dict[str, List[str]] = {
    'restaurant': [
        'Degrease and sanitize kitchen surfaces, hoods, and equipment areas',
        'Clean and sanitize food preparation surfaces and dining areas',
        'Detail clean bar areas and beverage stations',
        'Clean and polish all stainless steel surfaces',
        'Clean and sanitize walk-in coolers/freezers (exterior)',
        'Detail clean host stations and waiting areas',
    ],
    'fast_food': [
        'Degrease and sanitize kitchen surfaces and equipment',
        'Clean and sanitize food preparation surfaces',
        'Detail clean dining areas and seating',
        'Clean and polish all stainless steel surfaces',
        'Clean and sanitize drive-thru areas',
        'Detail clean service counters and registers',
    ],
    'medical': [
        'Sanitize all medical equipment surfaces and patient areas with hospital-grade disinfectants',
        'Detail clean and disinfect exam rooms and waiting areas',
        'Clean and sanitize reception areas and nurse stations',
        'Special attention to high-touch surfaces with medical-grade cleaners',
        'Clean and sanitize laboratory areas',
        'Disinfect all medical waste containers',
        'Clean and sanitize staff break rooms and locker areas',
    ],
    'retail': [
        'Detail clean fitting rooms and customer areas',
        'Clean and sanitize checkout counters and service desks',
        'Clean display cases and shelving units',
        'Special attention to customer-facing areas and displays',
        'Clean break rooms and employee areas',
        'Dust and clean all merchandise displays',
    ],
    'office': [
        'Vacuum carpeted areas',
        'Clean and sanitize break rooms and kitchen areas',
        'Detail clean conference rooms and reception areas',
        'Clean workstations and common areas',
        'Dust and clean all office furniture and equipment',
    ],
    'industrial': [
        'Clean and degrease machinery areas (external surfaces only)',
        'Clean break rooms and bathroom facilities',
        'Detail clean offices and meeting rooms',
        'Clean and sanitize locker rooms',
        'Clean and degrease shop floors',
        'Clean and sanitize all safety equipment stations',
        'Clean and organize maintenance areas',
    ],
    'educational': [
        'Sanitize desks, chairs, and educational equipment',
        'Deep clean cafeteria and food service areas',
        'Clean gymnasium and recreational spaces',
        'Detail clean administrative offices and common areas',
        'Clean and sanitize water fountains',
        'Clean and sanitize locker rooms',
        'Clean library and study areas',
    ],
    'hotel': [
        'Vacuum carpeted areas',
        'Detail clean guest rooms and corridors',
        'Clean lobby, reception, and common areas',
        'Detail clean conference rooms and business centers',
        'Clean and sanitize fitness center equipment',
        'Clean pool area and amenities',
        'Clean and organize housekeeping areas',
    ],
    'jewelry_store': [
        'Detail clean display cases and jewelry counters (30 per case)',
        'Clean and sanitize customer service areas',
        'Special attention to glass surfaces and mirrors',
        'Clean and polish all display fixtures',
        'Clean break rooms and employee areas',
    ],
    'grocery_store': [
        'Detail clean checkout areas and service counters',
        'Clean and sanitize shopping cart areas',
        'Clean and sanitize food preparation areas',
        'Special attention to produce and deli sections',
        'Clean break rooms and employee areas',
    ],
    'yoga_studio': [
        'Detail clean yoga rooms and meditation spaces',
        'Clean and sanitize equipment storage areas',
        'Special attention to mirrors and practice areas',
        'Clean reception and check-in areas',
        'Clean locker rooms and changing areas',
    ],
    'kids_fitness': [
        'Detail clean play equipment and fitness areas',
        'Clean and sanitize all exercise equipment',
        "Special attention to children's play zones",
        'Clean reception and parent waiting areas',
        'Clean locker rooms and changing areas',
    ],
    'bakery': [
        'Degrease and sanitize baking equipment and surfaces',
        'Clean and sanitize food preparation areas',
        'Detail clean display cases and counters',
        'Clean and polish all stainless steel surfaces',
        'Clean and sanitize storage areas',
        'Detail clean customer seating areas',
    ],
    'interactive_toy_store': [
        'Detail clean interactive play areas',
        'Clean and sanitize demonstration stations',
        'Special attention to hands-on display areas',
        'Clean break rooms and employee areas',
        'Special attention to high-touch interactive elements',
    ],
    'church': [
        'Detail clean sanctuary and seating areas',
        'Clean and sanitize common areas',
        'Special attention to altar and pulpit areas',
        'Clean fellowship halls and meeting rooms',
        "Clean nursery and children's areas",
    ],
    'arcade': [
        'Detail clean gaming machines and equipment',
        'Clean and sanitize prize counter areas',
        'Special attention to high-traffic gaming zones',
        'Clean break rooms and employee areas',
        'Clean seating and refreshment areas',
    ],
    'other': [
        'Detail clean all work areas',
        'Clean and sanitize common areas',
        'Special attention to customer-facing spaces',
        'Clean break rooms and employee areas',
    ],
}

# Spanish work orders use a single general template
SPANISH_TASKS = [
    'Barrer/trapear todos los pisos de superficie dura y aspirar áreas alfombradas',
    f'Limpiar ventanas interiores/exteriores ({WINDOW_COUNT_PLACEHOLDER} ventanas)',
    'Limpiar y desinfectar todos los baños',
    'Limpiar accesorios de iluminación y realizar limpieza de polvo en altura',
    'Limpiar y desinfectar salas de descanso y áreas de cocina',
    'Limpieza detallada de salas de conferencias y áreas de recepción',
    'Limpiar estaciones de trabajo y áreas comunes',
    'Desempolvar y limpiar todos los muebles y equipos de oficina',
    'Limpiar y desinfectar manijas de puertas e interruptores de luz',
    'Vaciar y limpiar todos los contenedores de basura',
    'Limpiar particiones y puertas de vidrio interiores',
    'Aspirar todos los muebles tapizados',
]


def get_scope_template(project_type: str, language: str = 'en') -> str:
    """
    Bulleted scope of work text for a project type

    Args:
        project_type: Project type key; unknown types use the 'other' template
        language: 'en' or 'es'

    Returns:
        Template text with the window count placeholder left in place
    """
    if language == 'es':
        header, tasks = SCOPE_HEADER_ES, SPANISH_TASKS
    else:
        specific = SPECIFIC_TASKS.get(project_type)
        if specific is None:
            logger.debug(f"No scope template for {project_type}, using 'other'")
            specific = SPECIFIC_TASKS['other']
        header, tasks = SCOPE_HEADER, [FLOOR_TASK] + specific + SHARED_TASKS

    return '\n'.join([header] + [f'• {task}' for task in tasks])


def build_scope_items(project_type: str, total_windows: int = 0, language: str = 'en') -> List[str]:
    """
    Scope of work as a list of task lines for rendering

    The header line is kept as the first item. The window line carries the
    window count, or is dropped when there are no windows.
    """
    items = []
    for line in get_scope_template(project_type, language).split('\n'):
        line = line.strip()
        if not line:
            continue
        if line.startswith('• '):
            line = line[2:].strip()
        if WINDOW_COUNT_PLACEHOLDER in line:
            if total_windows <= 0:
                continue
            line = line.replace(WINDOW_COUNT_PLACEHOLDER, str(total_windows))
        items.append(line)
    return items
