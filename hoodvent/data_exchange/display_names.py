"""English and Portuguese display names used in exported and imported
CSV-files.
"""

LANGUAGES = ('en', 'pt')

LABELS: dict[str, dict[str, str]] = {
    'en': {
        'title': "Kitchen Hood Airflow Estimator",
        'method': "Calculation Method:",
        'method_heat_load': "Heat Load Method (Appliance Power)",
        'method_hood_dimension': "Hood Dimensions Method",
        'hood_type': "Hood Type:",
        'diversity_factor': "Simultaneous Use Factor (Diversity):",
        'total_sensible': "Total Sensible Heat (with diversity):",
        'hood_factor': "Hood Factor Range:",
        'hood_length': "Hood Length (m):",
        'hood_depth': "Hood Depth (m):",
        'duty_level': "Typical Cooking Duty Level:",
        'airflow_per_meter': "Required Airflow per Meter Length (m³/h/m):",
        'airflow': "Estimated Airflow:",
        'th_name': "Appliance Name",
        'th_type': "Equipment Type",
        'th_gas_type': "Gas Type",
        'th_gas_usage': "Gas Usage",
        'th_gas_unit': "Unit",
        'th_electric': "Electric Usage (kW)",
        'th_total_power': "Total Power (kW)",
        'th_sensible_factor': "Sensible Factor",
        'th_sensible_heat': "Sensible Heat (kW)",
        'pressure_title': "Duct System & Pressure Drop",
        'exhaust_temperature': "Exhaust Air Temperature (°C):",
        'manual_airflow_toggle': "Use Manual Airflow:",
        'manual_airflow': "Manual Airflow (m³/h):",
        'recommended_duct': "Recommended Round Duct (at 10 m/s):",
        'filter': "Filter Pressure Drop (Pa):",
        'outlet': "Exhaust Outlet Type:",
        'velocity': "Duct Velocity (first segment):",
        'total_pressure': "Estimated Total Pressure Drop:",
        'layout_title': "Duct System Layout",
        'ds_order': "Order",
        'ds_type': "Type",
        'segment': "Segment",
        'fitting': "Fitting",
        'round': "Round",
        'rectangular': "Rectangular",
        'error': "Error:",
    },
    'pt': {
        'title': "Estimador de Caudal para Hotte de Cozinha",
        'method': "Método de Cálculo:",
        'method_heat_load': "Método Carga Térmica (Potência Equip.)",
        'method_hood_dimension': "Método Dimensões da Hotte",
        'hood_type': "Tipo de Hotte:",
        'diversity_factor': "Fator de Simultaneidade (Diversidade):",
        'total_sensible': "Calor Sensível Total (com simultaneidade):",
        'hood_factor': "Gama do Fator da Hotte:",
        'hood_length': "Comprimento Hotte (m):",
        'hood_depth': "Profundidade Hotte (m):",
        'duty_level': "Nível de Carga Típico da Cozinha:",
        'airflow_per_meter': "Caudal Necessário por Metro Linear (m³/h/m):",
        'airflow': "Caudal Estimado:",
        'th_name': "Nome Equipamento",
        'th_type': "Tipo Equipamento",
        'th_gas_type': "Tipo Gás",
        'th_gas_usage': "Consumo Gás",
        'th_gas_unit': "Unid.",
        'th_electric': "Consumo Elétrico (kW)",
        'th_total_power': "Potência Total (kW)",
        'th_sensible_factor': "Fator Sensível",
        'th_sensible_heat': "Calor Sensível (kW)",
        'pressure_title': "Sistema de Condutas & Perda de Carga",
        'exhaust_temperature': "Temperatura do Ar de Exaustão (°C):",
        'manual_airflow_toggle': "Usar Caudal Manual:",
        'manual_airflow': "Caudal Manual (m³/h):",
        'recommended_duct': "Conduta Circular Recomendada (a 10 m/s):",
        'filter': "Perda de Carga dos Filtros (Pa):",
        'outlet': "Tipo de Saída de Exaustão:",
        'velocity': "Velocidade na Conduta (primeiro troço):",
        'total_pressure': "Perda de Carga Total Estimada:",
        'layout_title': "Traçado do Sistema de Condutas",
        'ds_order': "Ordem",
        'ds_type': "Tipo",
        'segment': "Troço",
        'fitting': "Acessório",
        'round': "Circular",
        'rectangular': "Retangular",
        'error': "Erro:",
    },
}

# column headers of the duct layout table (not translated)
LAYOUT_HEADERS = (
    "Shape/Fitting",
    "Dim1(mm)/Up D(mm)",
    "Dim2(mm)/Down D(mm)",
    "Length(m)/Qty",
    "Material",
)

APPLIANCE_TYPES: dict[str, dict[str, str]] = {
    'en': {
        'fryer_open_pot': "Open Pot Fryer",
        'fryer_tube': "Tube-Type Fryer",
        'fryer_pressure': "Pressure Fryer",
        'grill_charbroiler_radiant': "Charbroiler (Radiant)",
        'grill_charbroiler_lava': "Charbroiler (Lava Rock)",
        'griddle_plate': "Griddle Plate",
        'grill_clam_shell': "Clam Shell Grill",
        'range_open_burner_gas': "Gas Range (Open Burner)",
        'range_hot_top_electric': "Electric Hot Top Range",
        'range_induction': "Induction Range",
        'wok_range_gas': "Gas Wok Range",
        'oven_convection': "Convection Oven",
        'oven_deck': "Deck Oven",
        'oven_combi': "Combi Oven (General)",
        'oven_pizza_conveyor': "Pizza Conveyor Oven",
        'oven_rotisserie': "Rotisserie Oven",
        'steamer_pressureless': "Pressureless Steamer",
        'steamer_pressure': "Pressure Steamer",
        'pasta_cooker': "Pasta Cooker / Boiler",
        'kettle_steam_jacketed': "Steam Jacketed Kettle",
        'bain_marie': "Bain Marie / Hot Well",
        'holding_cabinet_heated': "Heated Holding Cabinet",
        'dishwasher_conveyor_hooded': "Dishwasher (Conveyor, Hooded)",
        'other': "Other",
        'fryer': "Fryer (General)",
        'grill': "Grill (General)",
        'range_top': "Range Top (General)",
        'oven': "Oven (General)",
        'steamer': "Steamer (General)",
    },
    'pt': {
        'fryer_open_pot': "Fritadeira de Cuba Aberta",
        'fryer_tube': "Fritadeira de Tubos",
        'fryer_pressure': "Fritadeira de Pressão",
        'grill_charbroiler_radiant': "Grelhador (Radiante)",
        'grill_charbroiler_lava': "Grelhador (Pedra Vulcânica)",
        'griddle_plate': "Chapa de Grelhar",
        'grill_clam_shell': "Grelhador de Contacto",
        'range_open_burner_gas': "Fogão a Gás (Queimadores Abertos)",
        'range_hot_top_electric': "Placa Elétrica Maciça",
        'range_induction': "Placa de Indução",
        'wok_range_gas': "Fogão Wok a Gás",
        'oven_convection': "Forno de Convecção",
        'oven_deck': "Forno de Lastro",
        'oven_combi': "Forno Misto (Geral)",
        'oven_pizza_conveyor': "Forno de Pizza de Tapete",
        'oven_rotisserie': "Forno Rotisserie",
        'steamer_pressureless': "Panela a Vapor sem Pressão",
        'steamer_pressure': "Panela a Vapor com Pressão",
        'pasta_cooker': "Coze-Massas",
        'kettle_steam_jacketed': "Marmita de Camisa de Vapor",
        'bain_marie': "Banho-Maria",
        'holding_cabinet_heated': "Armário de Manutenção Aquecido",
        'dishwasher_conveyor_hooded': "Máquina de Lavar Loiça (Túnel, com Hotte)",
        'other': "Outro",
        'fryer': "Fritadeira (Geral)",
        'grill': "Grelhador (Geral)",
        'range_top': "Placa / Fogão (Geral)",
        'oven': "Forno (Geral)",
        'steamer': "Panela a Vapor (Geral)",
    },
}

GAS_TYPES: dict[str, dict[str, str]] = {
    'en': {
        'natural_gas': "Natural Gas",
        'natural_gas_g25': "Natural Gas G25",
        'propane_m3': "Propane (by volume)",
        'butane_m3': "Butane (by volume)",
        'propane': "Propane",
        'butane': "Butane",
    },
    'pt': {
        'natural_gas': "Gás Natural",
        'natural_gas_g25': "Gás Natural G25",
        'propane_m3': "Propano (volume)",
        'butane_m3': "Butano (volume)",
        'propane': "Propano",
        'butane': "Butano",
    },
}

HOOD_TYPES: dict[str, dict[str, str]] = {
    'en': {
        'wall': "Wall-Mounted Canopy",
        'island': "Island Canopy",
        'eyebrow': "Eyebrow / Backshelf",
    },
    'pt': {
        'wall': "Mural (Canópia)",
        'island': "Central (Ilha)",
        'eyebrow': "Compensada / Prateleira",
    },
}

DUTY_LEVELS: dict[str, dict[str, str]] = {
    'en': {
        'light': "Light Duty (e.g., Ovens, Steaming)",
        'medium': "Medium Duty (e.g., Ranges, Fryers)",
        'heavy': "Heavy Duty (e.g., Charbroilers, Woks)",
    },
    'pt': {
        'light': "Carga Ligeira (Ex: Fornos, Vapor)",
        'medium': "Carga Média (Ex: Fogões, Fritadeiras)",
        'heavy': "Carga Pesada (Ex: Grelhadores, Woks)",
    },
}

OUTLETS: dict[str, dict[str, str]] = {
    'en': {
        'weather_cap': "Weather Cap",
        'low_loss_louver': "Low-Loss Louver",
        'bird_screen': "Bird Screen",
        'open': "Open Discharge",
        'vertical_stack': "Vertical Stack",
        'gooseneck': "Gooseneck",
    },
    'pt': {
        'weather_cap': "Chapéu de Proteção",
        'low_loss_louver': "Grelha de Baixa Perda",
        'bird_screen': "Rede Anti-Pássaros",
        'open': "Descarga Livre",
        'vertical_stack': "Chaminé Vertical",
        'gooseneck': "Pescoço de Ganso",
    },
}

MATERIALS: dict[str, dict[str, str]] = {
    'en': {
        'galvanized': "Galvanized Steel",
        'stainless': "Stainless Steel",
        'pvc': "PVC",
        'aluminum': "Aluminum",
        'black_steel': "Black Steel",
        'flex_metal_uninsulated': "Flexible Metal (Uninsulated)",
    },
    'pt': {
        'galvanized': "Aço Galvanizado",
        'stainless': "Aço Inoxidável",
        'pvc': "PVC",
        'aluminum': "Alumínio",
        'black_steel': "Aço Preto",
        'flex_metal_uninsulated': "Metal Flexível (Sem Isolamento)",
    },
}

FITTINGS: dict[str, dict[str, str]] = {
    'en': {
        'elbow90_r_d_1_5': "90° Elbow, R/D = 1.5",
        'elbow90_r_d_1_0': "90° Elbow, R/D = 1.0",
        'elbow90_r_d_2_0': "90° Elbow, R/D = 2.0",
        'elbow90_mitred_novanes': "90° Mitred Elbow, No Vanes",
        'elbow45_r_d_1_5': "45° Elbow, R/D = 1.5",
        'transition_sudden_contraction': "Sudden Contraction",
        'transition_sudden_expansion': "Sudden Expansion",
        'transition_gradual_expansion_15deg': "Gradual Expansion (15°)",
        'transition_gradual_contraction_30deg': "Gradual Contraction (30°)",
        'damper_butterfly_fully_open': "Butterfly Damper (Fully Open)",
        'damper_butterfly_45deg': "Butterfly Damper (45°)",
        'damper_gate_fully_open': "Gate Damper (Fully Open)",
    },
    'pt': {
        'elbow90_r_d_1_5': "Curva 90°, R/D = 1,5",
        'elbow90_r_d_1_0': "Curva 90°, R/D = 1,0",
        'elbow90_r_d_2_0': "Curva 90°, R/D = 2,0",
        'elbow90_mitred_novanes': "Curva 90° em Gomos, Sem Alhetas",
        'elbow45_r_d_1_5': "Curva 45°, R/D = 1,5",
        'transition_sudden_contraction': "Redução Brusca",
        'transition_sudden_expansion': "Alargamento Brusco",
        'transition_gradual_expansion_15deg': "Alargamento Gradual (15°)",
        'transition_gradual_contraction_30deg': "Redução Gradual (30°)",
        'damper_butterfly_fully_open': "Registo de Borboleta (Aberto)",
        'damper_butterfly_45deg': "Registo de Borboleta (45°)",
        'damper_gate_fully_open': "Registo de Guilhotina (Aberto)",
    },
}

# Column headers recognized when importing appliances. Header cells are
# normalized with `normalize_header` before the lookup.
HEADER_SYNONYMS: dict[str, str] = {
    'appliancename': 'name', 'nomeequipamento': 'name',
    'equipmenttype': 'appliance_type', 'tipoequipamento': 'appliance_type',
    'gastype': 'gas_type', 'tipogás': 'gas_type', 'tipogas': 'gas_type',
    'gasusage': 'gas_usage', 'consumogás': 'gas_usage', 'consumogas': 'gas_usage',
    'gasunit': 'gas_unit', 'unid.': 'gas_unit', 'unit': 'gas_unit', 'unidade': 'gas_unit',
    'electricusagekw': 'electric_usage',
    'consumoelétricokw': 'electric_usage',
    'consumoeletricokw': 'electric_usage',
    'sensiblefactor': 'sensible_factor', 'fatorsensível': 'sensible_factor',
    'fatorsensivel': 'sensible_factor',
}

# free-text gas units and the key of the corresponding `ConsumptionUnit`
GAS_UNIT_SYNONYMS: dict[str, str] = {
    'm³/h': 'm3h', 'm3/h': 'm3h',
    'kg/h': 'kgh',
    'kw': 'kw', 'kwh': 'kw',
    'btu/h': 'btuh',
}

# markers of the header row of the appliance table
NAME_HEADER_MARKERS = ('appliance name', 'nome equipamento')


def normalize_header(text: str) -> str:
    """Lower-cases `text` and removes whitespace and parentheses."""
    return ''.join(
        c for c in text.lower()
        if not c.isspace() and c not in '()'
    )


def get_label(key: str, lang: str = 'en') -> str:
    return LABELS.get(lang, LABELS['en']).get(key, LABELS['en'][key])


def get_name(table: dict[str, dict[str, str]], key: str, lang: str = 'en') -> str:
    """Returns the display name of `key` in `table`. Falls back to English
    and then to the key itself.
    """
    names = table.get(lang, table['en'])
    return names.get(key) or table['en'].get(key) or key


def find_key(table: dict[str, dict[str, str]], text: str) -> str | None:
    """Returns the key whose display name (in any language) or whose key
    equals `text`, ignoring case. Returns None if nothing matches.
    """
    t = text.strip().lower()
    if not t:
        return None
    for names in table.values():
        for key, name in names.items():
            if t == key.lower() or t == name.lower():
                return key
    return None
