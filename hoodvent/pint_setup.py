import pint

# exhaust temperatures are entered in degC; multiplying them with other
# quantities converts them to kelvin first
UNITS = pint.UnitRegistry(autoconvert_offset_to_baseunit=True)
Quantity = UNITS.Quantity

pint.set_application_registry(UNITS)
