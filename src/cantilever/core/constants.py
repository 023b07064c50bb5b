"""Core constants for the stepped cantilever problem.

This module defines problem-wide invariants such as:
- Design vector layout (sections, slots per section)
- Encoding version (for archive compatibility)
- Default beam constants (load, lengths, material, limits)
"""

from __future__ import annotations

# Design vector layout
# Each section contributes (width, height); section 1 sits at the support.
N_SECTIONS = 5
SLOTS_PER_SECTION = 2
N_VARS = N_SECTIONS * SLOTS_PER_SECTION

# Archive versioning
# Bump when the slot layout or the discrete value sets change.
ENCODING_VERSION = "1.0"

# Default beam constants (cm, N)
END_LOAD_N = 50000.0
SECTION_LENGTH_CM = 100.0
YOUNGS_MODULUS = 2e7  # N/cm^2
SIGMA_MAX = 14000.0  # N/cm^2
DELTA_MAX_CM = 2.7
ASPECT_MAX = 20.0

# Deflection weights per section, support end first.
# Castigliano on a 5-step beam with I = b*h^3/12: (12 / 3) * (61, 37, 19, 7, 1)
DEFLECTION_WEIGHTS = (244.0, 148.0, 76.0, 28.0, 4.0)

# Default discrete sets for the second and third sections
WIDTH_SET_CM = (2.4, 2.6, 2.8, 3.1)
HEIGHT_SET_CM = (45.0, 50.0, 55.0, 60.0)
