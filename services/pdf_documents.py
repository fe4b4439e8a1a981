"""
PDF Document Generation
Quote, work order (English / Spanish), purchase order and change order
layouts built with reportlab platypus.
"""

import io
import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import inch
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from app.utils.helpers import format_currency, format_date, format_project_type, generate_quote_number
from services.models import CLEANING_TYPES, ProjectDescription, EstimateResult
from services.pricing import BASE_RATE_PER_SQFT, MARKUP_RATE, SALES_TAX_RATE, SCHEDULING_FEE, INVOICING_FEE, RESCHEDULE_MINIMUM_FEE, PER_DIEM_PER_DAY, CLEANERS_PER_ROOM
from services.scope_of_work import build_scope_items
from services.themes import get_theme

logger = logging.getLogger(__name__)

QUOTE_VALID_DAYS = 30

DEFAULT_QUOTE_NOTES = (
    'This quote includes all labor, materials, equipment, and supplies needed '
    'to complete the specified cleaning services.'
)

DEFAULT_QUOTE_TERMS = [
    'Payment Terms: 50% deposit required to secure booking, balance due upon completion.',
    'Cancellation Policy: 48-hour notice required for cancellation or rescheduling.',
    'Scope: This quote covers only the services explicitly described.',
    'Additional Services: Any services not specified will be quoted separately.',
    'Equipment: All necessary cleaning equipment and supplies are included.',
    'Access: Client must provide necessary access to the property.',
    'Utilities: Working electricity and water must be available on-site.',
    'Quote Validity: This quote is valid for 30 days from the date issued.',
]

RESCHEDULE_POLICY = (
    "If we are required to reschedule due to the site not being ready or poor planning on "
    f"the client's end, a minimum fee of ${RESCHEDULE_MINIMUM_FEE} will be charged for the return trip."
)

CHANGE_ORDER_FOOTER = (
    'This change order becomes part of and is subject to all terms and conditions '
    'of the original agreement.'
)

MULTI_STAGE_CLEANING_TYPES = ('rough_final', 'final_touchup', 'rough_final_touchup')

BLANK_LINE = '_____________________________'

WORK_ORDER_TEXT = {
    'en': {
        'title': 'Work Order',
        'phone': 'Phone',
        'project_details': 'Project Details',
        'project_name': 'Project Name',
        'location': 'Location',
        'project_type': 'Project Type',
        'total_area': 'Total Area',
        'sq_ft': 'sq ft',
        'cleaner_info': 'Cleaner Information',
        'name': 'Name',
        'email': 'Email',
        'scope': 'Scope of Work',
        'notes': 'Additional Notes',
        'amount': 'Amount',
        'start_date': 'Start Date',
        'fees': 'Important Fee Information',
        'supervisor': 'Supervisor',
        'cleaner': 'Cleaner',
        'signature': 'Signature',
        'date': 'Date',
        'fee_items': [
            ('Late Arrival Fee', [
                'If crew arrives more than 30 minutes late to the jobsite: $75/hour deduction from total invoice',
                'If crew arrives more than 1 hour late: $100/hour deduction from total invoice',
            ], 'Note: Crew must notify supervisor immediately of any potential delays'),
            ('Supervisor Involvement Fee', [
                "If supervisor's presence is required on-site due to crew performance issues: "
                "$150/hour charge to responsible crew members",
                'This fee covers travel time and on-site supervision time',
            ], 'Note: This fee will be deducted from crew payment if supervisor intervention is necessary'),
            ('Materials Fee', [
                'Additional charges will apply if supervisor needs to provide cleaning materials or equipment',
                'Material fees are determined case by case based on type and quantity needed',
            ], 'Note: Material fees will be discussed and agreed upon before the start of work'),
        ],
        'overnight_title': 'Overnight Accommodations & Payment',
        'overnight_items': [
            f'Hotel accommodations provided: {CLEANERS_PER_ROOM} cleaners per room arrangement',
            f'Per diem allowance: ${PER_DIEM_PER_DAY} per person per day (covers meals and incidentals)',
            'Per diem is paid upfront before travel departure',
            'Hotel bills are paid directly by company - no out-of-pocket expenses for crew',
            'Overnight duration: {nights} night(s) for {cleaners} crew member(s)',
        ],
        'overnight_note': (
            'Note: Per diem is for approved business expenses only. '
            'Receipts may be required for reimbursement verification.'
        ),
    },
    'es': {
        'title': 'Orden de Trabajo',
        'phone': 'Teléfono',
        'project_details': 'Detalles del Proyecto',
        'project_name': 'Nombre del Proyecto',
        'location': 'Ubicación',
        'project_type': 'Tipo de Proyecto',
        'total_area': 'Área Total',
        'sq_ft': 'pies cuadrados',
        'cleaner_info': 'Información del Limpiador',
        'name': 'Nombre',
        'email': 'Correo',
        'scope': 'Alcance del Trabajo',
        'notes': 'Notas Adicionales',
        'amount': 'Monto',
        'start_date': 'Fecha de Inicio',
        'fees': 'Información Importante sobre Tarifas',
        'supervisor': 'Supervisor',
        'cleaner': 'Limpiador',
        'signature': 'Firma',
        'date': 'Fecha',
        'fee_items': [
            ('Cargo por Llegada Tardía', [
                'Si el equipo llega más de 30 minutos tarde al sitio de trabajo: '
                '$75/hora de deducción de la factura total',
                'Si el equipo llega más de 1 hora tarde: $100/hora de deducción de la factura total',
            ], 'Nota: El equipo debe notificar al supervisor inmediatamente de cualquier retraso potencial'),
            ('Cargo por Intervención del Supervisor', [
                'Si se requiere la presencia del supervisor en el sitio debido a problemas de desempeño '
                'del equipo: $150/hora cargo a los miembros del equipo responsables',
                'Esta tarifa cubre el tiempo de viaje y el tiempo de supervisión en el sitio',
            ], 'Nota: Esta tarifa se deducirá del pago del equipo si es necesaria la intervención del supervisor'),
            ('Cargo por Materiales', [
                'Se aplicarán cargos adicionales si el supervisor necesita proporcionar materiales '
                'o equipos de limpieza',
                'Los cargos por materiales se determinan caso por caso según el tipo y la cantidad necesaria',
            ], 'Nota: Los cargos por materiales se discutirán y acordarán antes del inicio del trabajo'),
        ],
        'overnight_title': 'Alojamiento Nocturno y Pago',
        'overnight_items': [
            f'Alojamiento en hotel proporcionado: {CLEANERS_PER_ROOM} limpiadores por habitación',
            f'Viáticos: ${PER_DIEM_PER_DAY} por persona por día (cubre comidas e incidentales)',
            'Los viáticos se pagan por adelantado antes del viaje',
            'La empresa paga directamente las facturas del hotel',
            'Duración: {nights} noche(s) para {cleaners} miembro(s) del equipo',
        ],
        'overnight_note': (
            'Nota: Los viáticos son solo para gastos de negocio aprobados. '
            'Se pueden requerir recibos para verificación.'
        ),
    },
}


def _text(value: Any) -> str:
    """Escape user-supplied text for Paragraph markup"""
    return escape(str(value if value is not None else ''))


def _build_styles(theme_id: Optional[str]) -> Dict[str, Any]:
    pdf_colors = get_theme(theme_id)['pdf']
    accent = colors.HexColor(pdf_colors['accentColor'])
    styles = getSampleStyleSheet()

    return {
        'accent': accent,
        'header_background': colors.HexColor(pdf_colors['headerBackground']),
        'stripe': colors.HexColor(pdf_colors['tableStripe']),
        'normal': styles['Normal'],
        'title': ParagraphStyle(
            'CustomTitle',
            parent=styles['Heading1'],
            fontSize=24,
            textColor=accent,
            spaceAfter=12,
        ),
        'company': ParagraphStyle(
            'CompanyName',
            parent=styles['Heading2'],
            fontSize=16,
            textColor=accent,
            spaceAfter=4,
        ),
        'section': ParagraphStyle(
            'SectionTitle',
            parent=styles['Heading3'],
            textColor=accent,
            spaceBefore=10,
            spaceAfter=6,
        ),
        'small': ParagraphStyle(
            'Small',
            parent=styles['Normal'],
            fontSize=9,
            textColor=colors.HexColor('#666666'),
        ),
        'note': ParagraphStyle(
            'Note',
            parent=styles['Normal'],
            fontSize=9,
            fontName='Helvetica-Oblique',
            textColor=colors.HexColor('#666666'),
        ),
        'bullet': ParagraphStyle(
            'Bullet',
            parent=styles['Normal'],
            leftIndent=12,
            spaceAfter=2,
        ),
        'footer': ParagraphStyle(
            'Footer',
            parent=styles['Normal'],
            fontSize=8,
            alignment=1,
            textColor=colors.HexColor('#666666'),
        ),
    }


def _company_block(company_info: Dict[str, str], styles: Dict[str, Any], phone_label: str = 'Phone') -> List:
    story = [Paragraph(_text(company_info.get('name', '')), styles['company'])]
    for line in (company_info.get('address'), company_info.get('city')):
        if line:
            story.append(Paragraph(_text(line), styles['small']))
    if company_info.get('phone'):
        story.append(Paragraph(f"{phone_label}: {_text(company_info['phone'])}", styles['small']))
    if company_info.get('email'):
        story.append(Paragraph(_text(company_info['email']), styles['small']))
    return story


def _two_column(left: List, right: List, styles: Dict[str, Any]) -> Table:
    table = Table([[left, right]], colWidths=[3.5*inch, 3.5*inch])
    table.setStyle(TableStyle([
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('BACKGROUND', (0, 0), (-1, -1), styles['header_background']),
        ('LEFTPADDING', (0, 0), (-1, -1), 8),
        ('TOPPADDING', (0, 0), (-1, -1), 6),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 6),
    ]))
    return table


def _signature_table(labels: List[str], styles: Dict[str, Any], signature_label: str = 'Signature',
                     date_label: str = 'Date') -> Table:
    header = [Paragraph(f"<b>{_text(label)}</b>", styles['normal']) for label in labels]
    lines = [f"{signature_label}: {BLANK_LINE}" for _ in labels]
    dates = [f"{date_label}: ______________" for _ in labels]
    table = Table([header, lines, dates], colWidths=[3.5*inch] * len(labels))
    table.setStyle(TableStyle([
        ('TOPPADDING', (0, 1), (-1, -1), 14),
        ('FONTSIZE', (0, 1), (-1, -1), 9),
    ]))
    return table


def _footer(company_info: Dict[str, str], styles: Dict[str, Any], prefix: str = '') -> Paragraph:
    parts = [company_info.get('name', ''), company_info.get('phone', ''), company_info.get('email', '')]
    text = ' | '.join(_text(part) for part in parts if part)
    return Paragraph(f"{_text(prefix)}{text}", styles['footer'])


def _build(story: List) -> bytes:
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=letter,
                            leftMargin=0.6*inch, rightMargin=0.6*inch,
                            topMargin=0.6*inch, bottomMargin=0.6*inch)
    doc.build(story)
    return buffer.getvalue()


def default_quote_info(description: ProjectDescription, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Quote number, dates, notes and terms for a new quote"""
    now = now or datetime.now()
    return {
        'quoteNumber': generate_quote_number(now),
        'date': format_date(now),
        'validUntil': format_date(now + timedelta(days=QUOTE_VALID_DAYS)),
        'projectName': description.project_name,
        'projectAddress': description.location,
        'notes': DEFAULT_QUOTE_NOTES,
        'terms': '\n'.join(f"{i}. {term}" for i, term in enumerate(DEFAULT_QUOTE_TERMS, start=1)),
    }


def _merge_quote_info(description: ProjectDescription, quote_info: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    merged = default_quote_info(description)
    for key, value in (quote_info or {}).items():
        if value not in (None, ''):
            merged[key] = value
    return merged


def _service_rows(description: ProjectDescription, estimate: EstimateResult, styles: Dict[str, Any]) -> List[List]:
    cleaning_label = CLEANING_TYPES.get(description.cleaning_type, description.cleaning_type)

    def row(title, details, amount):
        body = f"<b>{_text(title)}</b>" + ''.join(f"<br/>{_text(line)}" for line in details)
        return [Paragraph(body, styles['normal']), format_currency(amount)]

    rows = [row(
        f"{cleaning_label} - {description.square_footage:,.0f} sq ft",
        [
            f"Base Rate: ${BASE_RATE_PER_SQFT:.2f}/sq ft",
            f"Project Type Multiplier: {estimate.project_type_multiplier:.2f}x",
            f"Cleaning Type Multiplier: {estimate.cleaning_type_multiplier:.2f}x",
        ],
        estimate.base_price,
    )]

    if estimate.vct_cost > 0:
        rows.append(row('VCT Flooring Treatment',
                        ['Stripping, waxing, and buffing of vinyl composition tile'], estimate.vct_cost))
    if estimate.pressure_washing_cost > 0:
        rows.append(row('Pressure Washing Services', [
            f"{description.pressure_washing_area:,.0f} sq ft of exterior/concrete surfaces",
            'Includes equipment rental and materials',
        ], estimate.pressure_washing_cost))
    if estimate.window_cleaning_cost > 0:
        rows.append(row('Window Cleaning', [
            f"{description.number_of_windows} standard, {description.number_of_large_windows} large, "
            f"{description.number_of_high_access_windows} high-access windows",
        ], estimate.window_cleaning_cost))
    if estimate.display_case_cost > 0:
        rows.append(row('Display Case Cleaning',
                        [f"{description.number_of_display_cases} display case(s)"], estimate.display_case_cost))

    rows.append(row('Travel Expenses', [
        f"{description.distance_from_office:g} miles at current gas price (${description.gas_price:.2f}/gallon)",
    ], estimate.travel_cost))

    if estimate.overnight_cost > 0:
        rows.append(row('Overnight Accommodations', [
            f"{description.number_of_nights} night(s) for {description.number_of_cleaners} staff members",
            'Includes hotel and per diem expenses',
        ], estimate.overnight_cost))
    if estimate.urgency_multiplier > 1:
        rows.append(row('Urgency Adjustment',
                        [f"Priority scheduling (Level {description.urgency_level}/10)"], estimate.urgency_adjustment))
    return rows


def render_quote(description: ProjectDescription, estimate: EstimateResult, company_info: Dict[str, str],
                 quote_info: Optional[Dict[str, Any]] = None, client_info: Optional[Dict[str, Any]] = None,
                 theme_id: Optional[str] = None) -> bytes:
    """
    Render a client-facing quote

    Args:
        description: Project the quote is for
        estimate: Calculated estimate for the project
        company_info: Company header details
        quote_info: Overrides for quote number, dates, notes and terms
        client_info: name, company, address, email, phone
        theme_id: Theme whose PDF colours are used

    Returns:
        PDF bytes
    """
    styles = _build_styles(theme_id)
    info = _merge_quote_info(description, quote_info)
    client = client_info or {
        'name': description.client_name,
        'email': description.client_email,
        'phone': description.client_phone,
    }
    story = []

    quote_header = [
        Paragraph('QUOTE', styles['title']),
        Paragraph(f"Quote #: {_text(info['quoteNumber'])}", styles['normal']),
        Paragraph(f"Date: {_text(info['date'])}", styles['normal']),
        Paragraph(f"Valid Until: {_text(info['validUntil'])}", styles['normal']),
    ]
    company = _company_block(company_info, styles)
    if company_info.get('website'):
        company.append(Paragraph(_text(company_info['website']), styles['small']))
    story.append(_two_column(company, quote_header, styles))
    story.append(Spacer(1, 0.2*inch))

    client_block = [Paragraph('Client Information', styles['section'])]
    for key in ('name', 'company', 'address', 'email', 'phone'):
        if client.get(key):
            client_block.append(Paragraph(_text(client[key]), styles['normal']))

    cleaning_label = CLEANING_TYPES.get(description.cleaning_type, description.cleaning_type)
    project_block = [Paragraph('Project Information', styles['section'])]
    for line in (info.get('projectName'), info.get('projectAddress')):
        if line:
            project_block.append(Paragraph(_text(line), styles['normal']))
    project_block += [
        Paragraph(f"Project Type: {_text(format_project_type(description.project_type))}", styles['normal']),
        Paragraph(f"Square Footage: {description.square_footage:,.0f} sq ft", styles['normal']),
        Paragraph(f"Cleaning Type: {_text(cleaning_label)}", styles['normal']),
    ]
    if description.number_of_bed_baths:
        project_block.append(Paragraph(f"Bed/Bath Units: {description.number_of_bed_baths}", styles['normal']))
    story.append(_two_column(client_block, project_block, styles))

    # Service details
    story.append(Paragraph('Service Details', styles['section']))
    table_data = [['Description', 'Amount']]
    table_data += _service_rows(description, estimate, styles)
    table_data.append(['Subtotal', format_currency(estimate.total_before_markup)])
    if estimate.markup > 0:
        table_data.append([f"Markup ({MARKUP_RATE:.0%})", format_currency(estimate.markup)])
    table_data.append([f"Sales Tax ({SALES_TAX_RATE:.0%})", format_currency(estimate.sales_tax)])
    table_data.append(['TOTAL', format_currency(estimate.total_price)])

    table = Table(table_data, colWidths=[5.3*inch, 1.6*inch], repeatRows=1)
    table.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), styles['accent']),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('ALIGN', (1, 0), (1, -1), 'RIGHT'),
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('ROWBACKGROUNDS', (0, 1), (-1, -2), [colors.white, styles['stripe']]),
        ('FONTNAME', (0, -1), (-1, -1), 'Helvetica-Bold'),
        ('FONTSIZE', (0, -1), (-1, -1), 12),
        ('LINEABOVE', (0, -1), (-1, -1), 2, styles['accent']),
        ('GRID', (0, 0), (-1, -2), 0.5, colors.HexColor('#dddddd')),
    ]))
    story.append(table)

    if description.apply_markup:
        reason = ('additional cleaning stages and multiple site visits'
                  if description.cleaning_type in MULTI_STAGE_CLEANING_TYPES
                  else 'additional supplies, equipment, and specialized cleaning materials')
        story.append(Spacer(1, 4))
        story.append(Paragraph(f"Note: This quote includes a {MARKUP_RATE:.0%} markup for {reason}.", styles['note']))

    story.append(Paragraph(
        f"Scheduling ({format_currency(SCHEDULING_FEE)}) and invoicing ({format_currency(INVOICING_FEE)}) "
        f"fees are billed separately.", styles['note']))

    # Timeline
    cleaners = max(description.number_of_cleaners, 1)
    story.append(Paragraph('Project Timeline', styles['section']))
    story.append(Paragraph(f"Estimated Hours: {estimate.estimated_hours:g} hours", styles['normal']))
    story.append(Paragraph(f"Team Size: {description.number_of_cleaners} cleaners", styles['normal']))
    story.append(Paragraph(f"Hours Per Cleaner: {estimate.estimated_hours / cleaners:.1f} hours", styles['normal']))
    story.append(Paragraph(f"Estimated Completion: {estimate.time_to_complete_in_days} day(s)", styles['normal']))

    if info.get('notes'):
        story.append(Paragraph('Additional Information', styles['section']))
        story.append(Paragraph(_text(info['notes']), styles['normal']))

    story.append(Paragraph('Terms &amp; Conditions', styles['section']))
    for line in str(info.get('terms', '')).split('\n'):
        if line.strip():
            story.append(Paragraph(_text(line.strip()), styles['small']))

    story.append(Paragraph('Reschedule/Site Access Policy', styles['section']))
    story.append(Paragraph(_text(RESCHEDULE_POLICY), styles['small']))

    story.append(Spacer(1, 0.2*inch))
    story.append(_signature_table(['Acceptance - Client Signature', 'Provider - Authorized Signature'], styles))
    story.append(Spacer(1, 0.3*inch))
    story.append(_footer(company_info, styles, prefix='Thank you for your business! | '))
    story.append(Paragraph(
        'All prices include our standard supplies, equipment, labor, and service fees for '
        'professional-grade cleaning.', styles['footer']))

    logger.info(f"Rendered quote {info['quoteNumber']}")
    return _build(story)


def render_work_order(description: ProjectDescription, company_info: Dict[str, str],
                      quote_info: Optional[Dict[str, Any]] = None, language: str = 'en',
                      theme_id: Optional[str] = None) -> bytes:
    """
    Render a crew work order in English or Spanish

    Amount and start date are left blank for the supervisor to fill in.
    """
    if language not in WORK_ORDER_TEXT:
        raise ValueError(f"Unsupported work order language: {language}")

    text = WORK_ORDER_TEXT[language]
    styles = _build_styles(theme_id)
    info = _merge_quote_info(description, quote_info)
    story = []

    story.append(_two_column(
        _company_block(company_info, styles, phone_label=text['phone']),
        [Paragraph(text['title'], styles['title'])],
        styles,
    ))
    story.append(Spacer(1, 0.2*inch))

    project_block = [
        Paragraph(text['project_details'], styles['section']),
        Paragraph(f"{text['project_name']}: {_text(info.get('projectName'))}", styles['normal']),
        Paragraph(f"{text['location']}: {_text(info.get('projectAddress'))}", styles['normal']),
        Paragraph(f"{text['project_type']}: {_text(format_project_type(description.project_type))}", styles['normal']),
        Paragraph(f"{text['total_area']}: {description.square_footage:,.0f} {text['sq_ft']}", styles['normal']),
    ]
    cleaner_block = [
        Paragraph(text['cleaner_info'], styles['section']),
        Paragraph(f"{text['name']}: {BLANK_LINE}", styles['normal']),
        Paragraph(f"{text['phone']}: {BLANK_LINE}", styles['normal']),
        Paragraph(f"{text['email']}: {BLANK_LINE}", styles['normal']),
    ]
    story.append(_two_column(project_block, cleaner_block, styles))

    story.append(Paragraph(text['scope'], styles['section']))
    for item in build_scope_items(description.project_type, description.total_windows, language):
        story.append(Paragraph(f"• {_text(item)}", styles['bullet']))

    if info.get('notes'):
        story.append(Paragraph(text['notes'], styles['section']))
        story.append(Paragraph(_text(info['notes']), styles['normal']))

    story.append(Paragraph(text['amount'], styles['section']))
    story.append(Paragraph(f"$ {BLANK_LINE}     {text['start_date']}: {BLANK_LINE}", styles['normal']))

    story.append(Paragraph(text['fees'], styles['section']))
    fee_items = list(text['fee_items'])
    if description.staying_overnight:
        overnight_lines = [
            line.format(nights=description.number_of_nights, cleaners=description.number_of_cleaners)
            for line in text['overnight_items']
        ]
        fee_items.append((text['overnight_title'], overnight_lines, text['overnight_note']))

    for title, lines, note in fee_items:
        story.append(Paragraph(f"<b>{_text(title)}</b>", styles['normal']))
        for line in lines:
            story.append(Paragraph(f"• {_text(line)}", styles['bullet']))
        story.append(Paragraph(_text(note), styles['note']))
        story.append(Spacer(1, 6))

    story.append(Spacer(1, 0.2*inch))
    story.append(_signature_table([text['supervisor'], text['cleaner']], styles,
                                  signature_label=text['signature'], date_label=text['date']))
    story.append(Spacer(1, 0.3*inch))
    story.append(_footer(company_info, styles))

    logger.info(f"Rendered {language} work order for {description.project_type}")
    return _build(story)


def render_purchase_order(description: ProjectDescription, company_info: Dict[str, str],
                          quote_info: Optional[Dict[str, Any]] = None, theme_id: Optional[str] = None) -> bytes:
    """Render a purchase order with the scope of work as the work description"""
    styles = _build_styles(theme_id)
    info = _merge_quote_info(description, quote_info)
    story = []

    po_header = [
        Paragraph('Purchase Order', styles['title']),
        Paragraph(_text(company_info.get('name', '')), styles['normal']),
    ]
    story.append(_two_column(_company_block(company_info, styles), po_header, styles))
    story.append(Spacer(1, 0.2*inch))

    project_block = [
        Paragraph('Project Details', styles['section']),
        Paragraph(f"Project Name: {_text(info.get('projectName'))}", styles['normal']),
        Paragraph(f"Location: {_text(info.get('projectAddress'))}", styles['normal']),
        Paragraph(f"Project Type: {_text(format_project_type(description.project_type))}", styles['normal']),
    ]
    cleaner_block = [
        Paragraph('Cleaner Information', styles['section']),
        Paragraph(f"Name: {BLANK_LINE}", styles['normal']),
        Paragraph(f"Phone: {BLANK_LINE}", styles['normal']),
        Paragraph(f"Email: {BLANK_LINE}", styles['normal']),
    ]
    story.append(_two_column(project_block, cleaner_block, styles))

    story.append(Paragraph('Work Description', styles['section']))
    for item in build_scope_items(description.project_type, description.total_windows):
        story.append(Paragraph(f"• {_text(item)}", styles['bullet']))

    story.append(Paragraph('Purchase Amount', styles['section']))
    story.append(Paragraph(f"$ {BLANK_LINE}", styles['normal']))

    if info.get('notes'):
        story.append(Paragraph('Additional Notes', styles['section']))
        story.append(Paragraph(_text(info['notes']), styles['normal']))

    story.append(Spacer(1, 0.2*inch))
    story.append(_signature_table(['Owner Approval', 'Supervisor Approval'], styles))
    story.append(Spacer(1, 0.3*inch))
    story.append(_footer(company_info, styles))

    logger.info(f"Rendered purchase order for {description.project_type}")
    return _build(story)


def render_change_order(company_info: Dict[str, str], client_info: Dict[str, Any], change_order: Dict[str, Any],
                        theme_id: Optional[str] = None) -> bytes:
    """
    Render a change order

    Args:
        company_info: Company header details
        client_info: name, company, address, email, phone
        change_order: orderNumber, date, projectName, projectAddress, description, amount

    Returns:
        PDF bytes
    """
    styles = _build_styles(theme_id)
    order_number = change_order.get('orderNumber') or f"CO-{datetime.now().strftime('%Y%m%d%H%M%S')}"
    order_date = change_order.get('date') or format_date()
    story = []

    company = _company_block(company_info, styles)
    if company_info.get('website'):
        company.append(Paragraph(_text(company_info['website']), styles['small']))
    order_header = [
        Paragraph('CHANGE ORDER', styles['title']),
        Paragraph(f"Order #: {_text(order_number)}", styles['normal']),
        Paragraph(f"Date: {_text(order_date)}", styles['normal']),
    ]
    story.append(_two_column(company, order_header, styles))
    story.append(Spacer(1, 0.2*inch))

    client_block = [Paragraph('Client Information', styles['section'])]
    for label, key in (('Name', 'name'), ('Company', 'company'), ('Address', 'address'),
                       ('Email', 'email'), ('Phone', 'phone')):
        client_block.append(Paragraph(f"<b>{label}:</b> {_text(client_info.get(key, ''))}", styles['normal']))
    project_block = [
        Paragraph('Project Information', styles['section']),
        Paragraph(f"<b>Project Name:</b> {_text(change_order.get('projectName', ''))}", styles['normal']),
        Paragraph(f"<b>Project Address:</b> {_text(change_order.get('projectAddress', ''))}", styles['normal']),
    ]
    story.append(_two_column(client_block, project_block, styles))

    story.append(Paragraph('Change Order Description', styles['section']))
    for line in str(change_order.get('description', '')).split('\n'):
        story.append(Paragraph(_text(line), styles['normal']))

    amount_table = Table([['Change Order Amount:', format_currency(change_order.get('amount'))]],
                         colWidths=[5.3*inch, 1.6*inch])
    amount_table.setStyle(TableStyle([
        ('FONTNAME', (0, 0), (-1, -1), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), 12),
        ('ALIGN', (1, 0), (1, 0), 'RIGHT'),
        ('BACKGROUND', (0, 0), (-1, -1), styles['stripe']),
        ('LINEABOVE', (0, 0), (-1, 0), 1, styles['accent']),
    ]))
    story.append(Spacer(1, 0.2*inch))
    story.append(amount_table)

    story.append(Spacer(1, 0.3*inch))
    story.append(_signature_table(['Client Signature', 'Company Representative'], styles))
    story.append(Spacer(1, 0.3*inch))
    story.append(Paragraph(CHANGE_ORDER_FOOTER, styles['footer']))

    logger.info(f"Rendered change order {order_number}")
    return _build(story)
