# Human-readable text for every id the analyzers emit, per locale.
#
# Matching and scoring never read from here; results carry the stable id
# next to the rendered message.

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

_EN: dict[str, str] = {
    # Issue categories
    "category.vague_language": "Vague language",
    "category.visual_estimation": "Visual estimation",
    "category.equipment_reliability": "Equipment reliability",
    "category.visibility_conditions": "Visibility conditions",
    "category.identification": "Uncertain identification",
    "category.signage": "Signage and markings",
    "category.signal_timing": "Signal timing",
    "category.stop_observation": "Stop observation",
    "category.procedural_gap": "Procedural gap",
    "category.subjective_opinion": "Subjective opinion",
    # Factors
    "factor.equipment_error": "Equipment error",
    "factor.no_calibration_record": "No calibration record",
    "factor.visual_estimate_only": "Speed estimated visually only",
    "factor.heavy_traffic": "Heavy traffic at the time",
    "factor.emergency": "Emergency circumstances",
    "factor.radar_confirmed": "Speed confirmed by radar",
    "factor.excessive_speed": "Far above the limit",
    "factor.short_yellow": "Yellow light too short",
    "factor.camera_malfunction": "Camera malfunction",
    "factor.identity_uncertainty": "Identity uncertainty",
    "factor.clear_video": "Clear video of the violation",
    "factor.sign_obstructed": "Sign obstructed",
    "factor.complete_stop_witness": "Witness to a complete stop",
    "factor.officer_view_blocked": "Officer's view blocked",
    "factor.no_limit_line": "No limit line painted",
    "factor.prior_warning": "Prior warning at this location",
    "factor.signage": "Unclear or missing signage",
    "factor.meter_malfunction": "Malfunctioning meter",
    "factor.valid_permit_displayed": "Valid permit displayed",
    "factor.ticket_details_wrong": "Wrong details on the ticket",
    "factor.loading_in_progress": "Actively loading or unloading",
    "factor.repeat_location": "Repeat ticket at this location",
    "factor.photo_by_officer": "Officer photographed the vehicle",
    "factor.permit_displayed": "Permit displayed",
    "factor.permit_zone_unmarked": "Permit zone not marked",
    "factor.permit_recently_expired": "Permit recently expired",
    "factor.placard_displayed": "Placard displayed",
    "factor.space_unmarked": "Space not properly marked",
    "factor.placard_fell": "Placard fell out of view",
    "factor.no_placard": "No placard issued",
    "factor.officer_procedure": "Officer procedural error",
    "factor.vague_statement": "Vague officer statement",
    "factor.extenuating_circumstance": "Extenuating circumstances",
    "factor.no_evidence_offered": "No evidence offered",
    # Dimensions and options
    "dimension.evidence_strength": "Strength of evidence",
    "dimension.appeal_timeliness": "Appeal timing",
    "dimension.prior_record": "Driving record",
    "dimension.jurisdiction": "Jurisdiction",
    "option.evidence_strength.none": "No evidence",
    "option.evidence_strength.some": "Some evidence",
    "option.evidence_strength.strong": "Strong evidence",
    "option.evidence_strength.conclusive": "Conclusive evidence",
    "option.appeal_timeliness.late": "Filed late",
    "option.appeal_timeliness.on_time": "Filed on time",
    "option.appeal_timeliness.early": "Filed early",
    "option.prior_record.repeat": "Repeat offender",
    "option.prior_record.unknown": "Unknown record",
    "option.prior_record.clean": "Clean record",
    "option.jurisdiction.strict": "Strict court",
    "option.jurisdiction.typical": "Typical court",
    "option.jurisdiction.lenient": "Lenient court",
    # Statement analysis
    "strength_high_impact_issue": "'{issue}' is a strong appeal point.",
    "strength_several_issues": "The statement has {count} separate weaknesses you can raise.",
    "strength_well_supported": "'{issue}' appears repeatedly in the statement.",
    "weakness_single_issue": "Only one kind of weakness was found; the appeal rests on it alone.",
    "weakness_only_minor_issues": "All weaknesses found are minor.",
    "weakness_no_procedural_issue": "No procedural or equipment issue was identified.",
    "recommend_strong": "The statement has strong appeal potential. Lead with the strongest points.",
    "recommend_moderate": "The statement has moderate appeal potential. Support each point with evidence.",
    "recommend_limited": "The statement offers limited grounds. Look for evidence beyond the statement.",
    "recommend_none": "No issues were found in the statement.",
    "recommend_lead_with": "Open your appeal with '{issue}'.",
    "recommend_respectful": "Be respectful and factual rather than accusatory.",
    # Prediction
    "factor_helps": "{factor} works in your favor.",
    "factor_hurts": "{factor} works against you.",
    "option_helps": "{dimension}: {option} works in your favor.",
    "option_hurts": "{dimension}: {option} works against you.",
    "missing_opportunity": "Not claimed: {factor}. Check whether it applies.",
    # Quality
    "suggest_more_detail": "Consider adding more details to strengthen your appeal.",
    "suggest_formatting": "Break your text into more paragraphs for better readability.",
    "suggest_persuasive": "Include more persuasive language and clear reasoning for your appeal.",
    "suggest_evidence": "Reference specific evidence to support your factual claims.",
    "suggest_closing": "Add a professional closing statement to your appeal.",
    "suggest_formal": "Use more formal language throughout your appeal.",
    "suggest_confidence": "Use more assertive language and active voice to sound more confident.",
    "suggest_procedural": "Focus more on the procedural errors or issues with how the fine was issued.",
    "suggest_factual": "Include more specific facts and evidence that contradict the fine.",
    "suggest_legal": "Reference specific laws, codes, or regulations that support your position.",
    "suggest_comprehensive": "Include a mix of procedural, factual, and legal arguments for a stronger comprehensive appeal.",
    "strength_clarity": "Your appeal is clear and well-structured.",
    "strength_persuasive": "Your arguments are persuasive and well-reasoned.",
    "strength_professional": "Your appeal maintains a professional and respectful tone.",
    "strength_confidence": "Your appeal sounds confident and authoritative.",
    "strength_procedural": "Your focus on procedural issues is appropriate for this type of appeal.",
    "strength_factual": "Your presentation of facts and evidence is compelling.",
    "strength_legal": "Your legal references strengthen your position.",
    "strength_comprehensive": "Your comprehensive approach addresses multiple aspects of the appeal effectively.",
    "issue_long_sentence": "This sentence is very long.",
    "issue_passive_voice": "Passive voice weakens this sentence.",
    "issue_weak_phrase": "Hedging language weakens your position.",
    "issue_missing_legal_references": "No legal references were found.",
    "issue_missing_evidence_reference": "No evidence is mentioned.",
    "fix_long_sentence": "Consider breaking this into multiple shorter sentences for clarity.",
    "fix_passive_voice": "Consider using active voice for more impact and clarity.",
    "fix_weak_phrase": "Replace '{phrase}' with more definitive language.",
    "fix_missing_legal_references": "Include specific legal references (sections, codes) to strengthen your legal argument.",
    "fix_missing_evidence_reference": "Mention specific evidence or proof to support your factual claims.",
    "score_excellent": "Excellent",
    "score_very_good": "Very good",
    "score_good": "Good",
    "score_fair": "Fair",
    "score_needs_work": "Needs work",
    "score_poor": "Poor",
    # Regulation excerpts
    "regulation.ca-park-1.title": "Prohibited Parking Locations",
    "regulation.ca-park-1.description": (
        "Specifies locations where vehicles cannot be parked, including crosswalks, sidewalks, "
        "and in front of driveways."
    ),
    "regulation.ca-park-1.full_text": (
        "No person shall stop, park, or leave standing any vehicle whether attended or unattended, "
        "except when necessary to avoid conflict with other traffic or in compliance with the directions "
        "of a peace officer or official traffic control device, in any of the following places: "
        "(a) Within an intersection. (b) On a crosswalk. (c) On a sidewalk..."
    ),
    "regulation.ny-park-1.title": "Standing and Parking Regulations",
    "regulation.ny-park-1.description": (
        "New York City parking regulations prohibiting standing or parking in specified places."
    ),
    "regulation.ny-park-1.full_text": (
        "No person shall stand or park a vehicle: (1) Within a marked crosswalk. (2) Within 20 feet of a "
        "crosswalk at an intersection. (3) Alongside or opposite any street excavation or obstruction when "
        "stopping, standing, or parking would obstruct traffic..."
    ),
    "regulation.tx-speed-1.title": "Prima Facie Speed Limits",
    "regulation.tx-speed-1.description": (
        "Establishes speed limits on various types of roads in Texas and requirements for speed measurement."
    ),
    "regulation.tx-speed-1.full_text": (
        "(a) A speed in excess of the limits established by Subsection (b) or under another provision of "
        "this subchapter is prima facie evidence that the speed is not reasonable and prudent and that the "
        "speed is unlawful. (b) Unless a special hazard exists that requires a slower speed for compliance "
        "with Section 545.351(b), the following speeds are lawful: (1) 30 miles per hour in an urban district..."
    ),
    "regulation.fl-speed-1.title": "Unlawful Speed",
    "regulation.fl-speed-1.description": (
        "Florida statutes regarding maximum speed limits and requirements for speed detection devices."
    ),
    "regulation.fl-speed-1.full_text": (
        "(1) No person shall drive a vehicle on a highway at a speed greater than is reasonable and prudent "
        "under the conditions and having regard to the actual and potential hazards then existing. In every "
        "event, speed shall be controlled as may be necessary to avoid colliding with any person, vehicle, or "
        "other conveyance or object on or entering the highway..."
    ),
    "regulation.il-red-1.title": "Traffic Control Signal Legend",
    "regulation.il-red-1.description": (
        "Illinois laws regarding traffic signals and procedures for automated traffic enforcement systems."
    ),
    "regulation.il-red-1.full_text": (
        "Whenever traffic is controlled by traffic-control signals exhibiting different colored lights or "
        "color lighted arrows, successively one at a time or in combination, only the colors green, red and "
        "yellow shall be used, except for special pedestrian signals..."
    ),
    "regulation.fed-proc-1.title": "Mode of Recovery for Civil Penalties",
    "regulation.fed-proc-1.description": (
        "Federal procedures for contesting and appealing civil penalties, including traffic violations."
    ),
    "regulation.fed-proc-1.full_text": (
        "Whenever a civil fine, penalty or pecuniary forfeiture is prescribed for the violation of an Act of "
        "Congress without specifying the mode of recovery or enforcement thereof, it may be recovered in a "
        "civil action. Unless otherwise specified by statute, any civil penalty may be compromised by the "
        "proper authority..."
    ),
    # Legal arguments
    "argument.p1.title": "Inadequate Signage",
    "argument.p1.description": (
        "The parking restriction was not clearly indicated by proper signage as required by local regulations."
    ),
    "argument.p1.reference": "Municipal Code §12.56.450",
    "argument.p1.appeal_text": (
        "I am contesting this parking citation on the grounds that the parking restriction was not properly "
        "posted as required by Municipal Code §12.56.450. In this case, the signage was "
        "[obscured/missing/damaged/unclear], making it impossible for a reasonable person to be aware of the "
        "restriction. The precedent set in Martinez v. City of Los Angeles (2018) established that "
        "municipalities have the burden of ensuring clear and visible parking signage."
    ),
    "argument.p2.title": "Malfunctioning Meter",
    "argument.p2.description": (
        "The parking meter was not functioning properly, preventing payment despite reasonable attempts."
    ),
    "argument.p2.reference": "Vehicle Code §22508",
    "argument.p2.appeal_text": (
        "I respectfully contest this citation on the basis that the parking meter (Number: [METER ID]) was "
        "malfunctioning at the time of the alleged violation, as provided for in Vehicle Code §22508. "
        "I made multiple attempts to pay using [credit card/coins/mobile app], but the meter "
        "[error message/would not accept payment/displayed out of order]."
    ),
    "argument.s1.title": "Radar Calibration Issues",
    "argument.s1.description": (
        "Speed detection equipment must be properly calibrated and certified according to legal standards."
    ),
    "argument.s1.reference": "Traffic Enforcement Act §453.6",
    "argument.s1.appeal_text": (
        "I am contesting this speeding citation on the grounds that the radar/lidar equipment used may not "
        "have been properly calibrated as required by Traffic Enforcement Act §453.6. In State v. Jenkins "
        "(2019), the court established that the burden is on the enforcement agency to provide documentation "
        "of proper calibration when challenged. I formally request evidence of the calibration and "
        "certification of the device used in this citation (Device ID: [DEVICE ID if known])."
    ),
    "argument.s2.title": "Emergency Circumstances",
    "argument.s2.description": (
        "Temporary speed limit violations may be excused under certain emergency conditions."
    ),
    "argument.s2.reference": "Vehicle Code §21055",
    "argument.s2.appeal_text": (
        "I am requesting dismissal of this citation due to emergency circumstances that necessitated "
        "temporarily exceeding the posted speed limit as permitted under Vehicle Code §21055. At the time of "
        "the alleged violation, I was [describe emergency situation]. I have attached documentation "
        "supporting this emergency claim [if available]."
    ),
    "argument.r1.title": "Yellow Light Timing",
    "argument.r1.description": (
        "Yellow traffic signals must be timed according to specific engineering standards."
    ),
    "argument.r1.reference": "Federal Highway Administration Standards 4D.26",
    "argument.r1.appeal_text": (
        "I am contesting this red light citation on the basis that the yellow light at this intersection "
        "([INTERSECTION NAME]) may not conform to the Federal Highway Administration Standards 4D.26, which "
        "requires yellow light timing of at least 1 + [Speed Limit (mph) ÷ 10] seconds. In Williams v. "
        "Department of Transportation (2020), the court established that citations issued at intersections "
        "with improperly timed yellow lights must be dismissed."
    ),
    "argument.g1.title": "Procedural Error",
    "argument.g1.description": (
        "Citing officers must follow specific procedural requirements when issuing tickets."
    ),
    "argument.g1.reference": "Traffic Procedures Manual §8.4.2",
    "argument.g1.appeal_text": (
        "I am respectfully requesting dismissal of this citation due to procedural errors in its issuance "
        "according to Traffic Procedures Manual §8.4.2. This citation contains the following procedural "
        "error(s): [DESCRIBE SPECIFIC ERROR(S)]. These requirements ensure due process and proper "
        "documentation of alleged violations."
    ),
}

_ES: dict[str, str] = {
    "category.vague_language": "Lenguaje impreciso",
    "category.visual_estimation": "Estimación visual",
    "category.equipment_reliability": "Fiabilidad del equipo",
    "category.visibility_conditions": "Condiciones de visibilidad",
    "category.identification": "Identificación dudosa",
    "category.signage": "Señalización y marcas",
    "category.signal_timing": "Tiempo del semáforo",
    "category.stop_observation": "Observación de la parada",
    "category.procedural_gap": "Fallo de procedimiento",
    "category.subjective_opinion": "Opinión subjetiva",
    "factor.signage": "Señalización confusa o ausente",
    "factor.meter_malfunction": "Parquímetro defectuoso",
    "factor.equipment_error": "Error del equipo",
    "factor.no_calibration_record": "Sin registro de calibración",
    "factor.short_yellow": "Luz amarilla demasiado corta",
    "factor.officer_procedure": "Error de procedimiento del agente",
    "factor.identity_uncertainty": "Identidad dudosa",
    "factor.extenuating_circumstance": "Circunstancias atenuantes",
    "dimension.evidence_strength": "Solidez de la evidencia",
    "dimension.appeal_timeliness": "Plazo del recurso",
    "dimension.prior_record": "Historial de conducción",
    "dimension.jurisdiction": "Jurisdicción",
    "strength_high_impact_issue": "'{issue}' es un argumento sólido para el recurso.",
    "strength_several_issues": "La declaración tiene {count} debilidades distintas que puede señalar.",
    "strength_well_supported": "'{issue}' aparece repetidamente en la declaración.",
    "weakness_single_issue": "Solo se encontró un tipo de debilidad; el recurso depende de ella.",
    "weakness_only_minor_issues": "Todas las debilidades encontradas son menores.",
    "weakness_no_procedural_issue": "No se identificó ningún problema de procedimiento o de equipo.",
    "recommend_strong": "La declaración tiene un gran potencial de recurso. Empiece por los puntos más sólidos.",
    "recommend_moderate": "La declaración tiene un potencial moderado. Respalde cada punto con evidencias.",
    "recommend_limited": "La declaración ofrece pocos motivos. Busque evidencias adicionales.",
    "recommend_none": "No se encontraron problemas en la declaración.",
    "recommend_lead_with": "Comience su recurso con '{issue}'.",
    "recommend_respectful": "Sea respetuoso y objetivo en lugar de acusatorio.",
    "factor_helps": "{factor} juega a su favor.",
    "factor_hurts": "{factor} juega en su contra.",
    "option_helps": "{dimension}: {option} juega a su favor.",
    "option_hurts": "{dimension}: {option} juega en su contra.",
    "missing_opportunity": "No alegado: {factor}. Compruebe si aplica.",
    "suggest_more_detail": "Considera añadir más detalles para fortalecer tu recurso.",
    "suggest_formatting": "Divide tu texto en más párrafos para mejorar la legibilidad.",
    "suggest_persuasive": "Incluye un lenguaje más persuasivo y un razonamiento claro para tu recurso.",
    "suggest_evidence": "Haz referencia a evidencias específicas para respaldar tus afirmaciones factuales.",
    "suggest_closing": "Añade una conclusión profesional a tu recurso.",
    "suggest_formal": "Utiliza un lenguaje más formal en todo tu recurso.",
    "suggest_confidence": "Usa un lenguaje más firme y la voz activa para transmitir seguridad.",
    "suggest_procedural": "Céntrate más en los errores procedimentales o problemas con cómo se emitió la multa.",
    "suggest_factual": "Incluye más hechos específicos y evidencias que contradigan la multa.",
    "suggest_legal": "Haz referencia a leyes, códigos o reglamentos específicos que respalden tu posición.",
    "suggest_comprehensive": "Incluye una combinación de argumentos procedimentales, factuales y legales para un recurso integral más sólido.",
    "strength_clarity": "Tu recurso es claro y está bien estructurado.",
    "strength_persuasive": "Tus argumentos son persuasivos y están bien razonados.",
    "strength_professional": "Tu recurso mantiene un tono profesional y respetuoso.",
    "strength_confidence": "Tu recurso suena seguro y con autoridad.",
    "strength_procedural": "Tu enfoque en cuestiones procedimentales es apropiado para este tipo de recurso.",
    "strength_factual": "Tu presentación de hechos y evidencias es convincente.",
    "strength_legal": "Tus referencias legales fortalecen tu posición.",
    "strength_comprehensive": "Tu enfoque integral aborda múltiples aspectos del recurso de manera efectiva.",
    "issue_long_sentence": "Esta frase es muy larga.",
    "issue_passive_voice": "La voz pasiva debilita esta frase.",
    "issue_weak_phrase": "El lenguaje dubitativo debilita tu posición.",
    "issue_missing_legal_references": "No se encontraron referencias legales.",
    "issue_missing_evidence_reference": "No se menciona ninguna evidencia.",
    "fix_long_sentence": "Considera dividirla en varias frases más cortas.",
    "fix_passive_voice": "Considera usar la voz activa para dar más claridad.",
    "fix_weak_phrase": "Sustituye '{phrase}' por un lenguaje más definitivo.",
    "fix_missing_legal_references": "Incluye referencias legales concretas (artículos, códigos).",
    "fix_missing_evidence_reference": "Menciona evidencias o pruebas concretas.",
    "score_excellent": "Excelente",
    "score_very_good": "Muy bueno",
    "score_good": "Bueno",
    "score_fair": "Aceptable",
    "score_needs_work": "Mejorable",
    "score_poor": "Deficiente",
    "regulation.ca-park-1.title": "Ubicaciones Prohibidas para Estacionamiento",
    "regulation.ca-park-1.description": (
        "Especifica lugares donde los vehículos no pueden estacionarse, incluyendo cruces peatonales, "
        "aceras y frente a entradas de vehículos."
    ),
    "regulation.ca-park-1.full_text": (
        "Ninguna persona deberá detener, estacionar o dejar parado cualquier vehículo, ya sea atendido o "
        "desatendido, excepto cuando sea necesario para evitar conflictos con otro tráfico, en cualquiera de "
        "los siguientes lugares: (a) Dentro de una intersección. (b) En un cruce peatonal. (c) En una acera..."
    ),
    "regulation.ny-park-1.title": "Regulaciones de Parada y Estacionamiento",
    "regulation.ny-park-1.description": (
        "Regulaciones de estacionamiento de la Ciudad de Nueva York que prohíben detenerse o estacionarse "
        "en lugares específicos."
    ),
    "regulation.ny-park-1.full_text": (
        "Ninguna persona deberá detenerse o estacionar un vehículo: (1) Dentro de un cruce peatonal marcado. "
        "(2) A menos de 20 pies de un cruce peatonal en una intersección..."
    ),
    "regulation.tx-speed-1.title": "Límites de Velocidad Prima Facie",
    "regulation.tx-speed-1.description": (
        "Establece límites de velocidad en varios tipos de caminos en Texas y requisitos para la medición "
        "de velocidad."
    ),
    "regulation.tx-speed-1.full_text": (
        "(a) Una velocidad que exceda los límites establecidos por la Subsección (b) es evidencia prima facie "
        "de que la velocidad no es razonable y prudente y que la velocidad es ilegal..."
    ),
    "regulation.fl-speed-1.title": "Velocidad Ilegal",
    "regulation.fl-speed-1.description": (
        "Estatutos de Florida sobre límites máximos de velocidad y requisitos para dispositivos de "
        "detección de velocidad."
    ),
    "regulation.fl-speed-1.full_text": (
        "(1) Ninguna persona conducirá un vehículo en una carretera a una velocidad mayor de lo que es "
        "razonable y prudente bajo las condiciones existentes..."
    ),
    "regulation.il-red-1.title": "Leyenda de Señales de Control de Tráfico",
    "regulation.il-red-1.description": (
        "Leyes de Illinois sobre señales de tráfico y procedimientos para sistemas automatizados de "
        "aplicación de tráfico."
    ),
    "regulation.il-red-1.full_text": (
        "Siempre que el tráfico sea controlado por señales de control de tráfico que exhiban luces de "
        "diferentes colores, solo se utilizarán los colores verde, rojo y amarillo..."
    ),
    "regulation.fed-proc-1.title": "Modo de Recuperación de Sanciones Civiles",
    "regulation.fed-proc-1.description": (
        "Procedimientos federales para impugnar y apelar sanciones civiles, incluidas las infracciones "
        "de tráfico."
    ),
    "regulation.fed-proc-1.full_text": (
        "Siempre que se prescriba una multa civil, sanción o decomiso pecuniario por la violación de una Ley "
        "del Congreso sin especificar el modo de recuperación, se puede recuperar en una acción civil..."
    ),
    "argument.p1.title": "Señalización Inadecuada",
    "argument.p1.description": (
        "La restricción de estacionamiento no estaba claramente indicada por la señalización adecuada "
        "según lo exigen las regulaciones locales."
    ),
    "argument.p1.reference": "Código Municipal §12.56.450",
    "argument.p1.appeal_text": (
        "Estoy impugnando esta multa de estacionamiento porque la restricción no estaba correctamente "
        "señalizada según lo requiere el Código Municipal §12.56.450. En este caso, la señalización estaba "
        "[oculta/faltante/dañada/poco clara]. El precedente establecido en Martínez v. Ciudad de Los Ángeles "
        "(2018) determinó que los municipios deben garantizar una señalización clara y visible."
    ),
    "argument.p2.title": "Parquímetro Defectuoso",
    "argument.p2.description": (
        "El parquímetro no funcionaba correctamente, lo que impedía el pago a pesar de intentos razonables."
    ),
    "argument.p2.reference": "Código de Vehículos §22508",
    "argument.p2.appeal_text": (
        "Impugno respetuosamente esta citación debido a que el parquímetro (Número: [ID DEL PARQUÍMETRO]) "
        "no funcionaba correctamente en el momento de la supuesta infracción, según el Código de Vehículos "
        "§22508. Realicé múltiples intentos de pago, pero el parquímetro [mensaje de error/no aceptaba el pago]."
    ),
    "argument.s1.title": "Problemas de Calibración del Radar",
    "argument.s1.description": (
        "Los equipos de detección de velocidad deben estar correctamente calibrados y certificados según "
        "los estándares legales."
    ),
    "argument.s1.reference": "Ley de Control de Tráfico §453.6",
    "argument.s1.appeal_text": (
        "Estoy impugnando esta citación por exceso de velocidad porque es posible que el equipo de "
        "radar/lidar no haya sido calibrado según lo exige la Ley de Control de Tráfico §453.6. Solicito "
        "formalmente evidencia de la calibración y certificación del dispositivo utilizado "
        "(ID del dispositivo: [ID DEL DISPOSITIVO si se conoce])."
    ),
    "argument.s2.title": "Circunstancias de Emergencia",
    "argument.s2.description": (
        "Las infracciones temporales del límite de velocidad pueden ser excusadas bajo ciertas condiciones "
        "de emergencia."
    ),
    "argument.s2.reference": "Código de Vehículos §21055",
    "argument.s2.appeal_text": (
        "Solicito la desestimación de esta citación debido a circunstancias de emergencia, según el Código "
        "de Vehículos §21055. En el momento de la supuesta infracción, estaba [describir situación de "
        "emergencia]. He adjuntado documentación que respalda esta afirmación [si está disponible]."
    ),
    "argument.r1.title": "Tiempo de Luz Amarilla",
    "argument.r1.description": (
        "Las señales de tráfico amarillas deben cronometrarse según estándares de ingeniería específicos."
    ),
    "argument.r1.reference": "Estándares de la Administración Federal de Carreteras 4D.26",
    "argument.r1.appeal_text": (
        "Estoy impugnando esta citación de luz roja porque la luz amarilla en esta intersección "
        "([NOMBRE DE LA INTERSECCIÓN]) puede no cumplir con los Estándares de la Administración Federal de "
        "Carreteras 4D.26. En Williams v. Departamento de Transporte (2020), el tribunal estableció que las "
        "citaciones emitidas con luces amarillas mal cronometradas deben ser desestimadas."
    ),
    "argument.g1.title": "Error de Procedimiento",
    "argument.g1.description": (
        "Los oficiales que emiten citaciones deben seguir requisitos procedimentales específicos."
    ),
    "argument.g1.reference": "Manual de Procedimientos de Tráfico §8.4.2",
    "argument.g1.appeal_text": (
        "Solicito respetuosamente la desestimación de esta citación debido a errores de procedimiento en su "
        "emisión según el Manual de Procedimientos de Tráfico §8.4.2. Esta citación contiene el siguiente(s) "
        "error(es) de procedimiento: [DESCRIBIR ERROR(ES) ESPECÍFICO(S)]."
    ),
}

MESSAGES: dict[str, dict[str, str]] = {"en": _EN, "es": _ES}


def render(code: str, locale: str = DEFAULT_LOCALE, **kwargs: object) -> str:
    """Look up ``code`` for ``locale``, falling back to English, then to the code itself."""
    table = MESSAGES.get(locale)
    if table is None:
        logger.warning(f"Unknown locale {locale!r}; using {DEFAULT_LOCALE!r}.")
        table = MESSAGES[DEFAULT_LOCALE]
    template = table.get(code) or MESSAGES[DEFAULT_LOCALE].get(code)
    if template is None:
        logger.debug(f"No label for {code!r}")
        return code
    return template.format(**kwargs) if kwargs else template


def label(kind: str, *ids: str, locale: str = DEFAULT_LOCALE) -> str:
    """Display name of a catalog entry, e.g. ``label("factor", "signage")``."""
    return render(".".join((kind, *ids)), locale)


def resolve_locale(locale: str | None, diagnostics: list[str]) -> str:
    if locale in MESSAGES:
        return locale
    message = f"Unknown locale {locale!r}; using {DEFAULT_LOCALE!r}."
    logger.warning(message)
    diagnostics.append(message)
    return DEFAULT_LOCALE
