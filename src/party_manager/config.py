# Roster capacity
ROSTER_SIZE = 6

# Delay before the party canvas opens after the roster fills (ms)
PARTY_VIEW_DELAY_MS = 300

# Pacing delay before an assessment is surfaced (ms)
ASSESSMENT_DELAY_MS = 1500

# Celebration particle burst parameters
CELEBRATION_PARTICLE_COUNT = 100
CELEBRATION_SPREAD = 70
CELEBRATION_ORIGIN_Y = 0.6
