from .. import Quantity as Q_

STANDARD_PRESSURE = Q_(101325.0, 'Pa')
STANDARD_TEMPERATURE = Q_(20.0, 'degC')

# specific gas constant of dry air
R_AIR = Q_(287.058, 'J / (kg * K)')

# Sutherland's law for the dynamic viscosity of air
MU_REF_SUTHERLAND = Q_(1.716e-5, 'Pa * s')
T_REF_SUTHERLAND = Q_(273.15, 'K')
C_SUTHERLAND = Q_(110.4, 'K')
