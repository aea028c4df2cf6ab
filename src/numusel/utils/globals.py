"""Module which contains all global variables shared across the project."""

import numpy as np

# Particle ID of each recognized particle species
PHOT_PID = 0
ELEC_PID = 1
MUON_PID = 2
PION_PID = 3
PROT_PID = 4

# Number of particle species counted towards an interaction topology
NUM_PID = 5

# Particle type labels
PID_LABELS = {
    -1: 'Unknown',
    PHOT_PID: 'Photon',
    ELEC_PID: 'Electron',
    MUON_PID: 'Muon',
    PION_PID: 'Pion',
    PROT_PID: 'Proton'
}

# Particle type tags, as used in the topology string
PID_TAGS = {
    PHOT_PID: 'ph',
    ELEC_PID: 'e',
    MUON_PID: 'mu',
    PION_PID: 'pi',
    PROT_PID: 'p'
}

# Particle masses
ELEC_MASS = 0.5109989461 # [MeV/c^2]
MUON_MASS = 105.6583745  # [MeV/c^2]
PION_MASS = 139.57039    # [MeV/c^2]
PROT_MASS = 938.2720813  # [MeV/c^2]

# Rest mass added to the visible energy of each primary species
PID_MASS_ADDENDS = {
    MUON_PID: MUON_MASS,
    PION_PID: PION_MASS
}

# Final state signal kinetic energy thresholds
MUON_KE_THRESHOLD = 143.425 # [MeV] CSDA KE of a 50 cm muon
PROT_KE_THRESHOLD = 50.     # [MeV]
OTHER_KE_THRESHOLD = 25.    # [MeV]

# Region excluded from the fiducial volume (x_min, y_min, z_min, z_max)
DEAD_REGION_X_MIN = 210.215 # [cm]
DEAD_REGION_Y_MIN = 60.     # [cm]
DEAD_REGION_Z_RANGE = (290., 390.) # [cm]

# In-time flash windows w.r.t. the beam gate
BNB_FLASH_WINDOW = (0., 1.6)  # [us]
NUMI_FLASH_WINDOW = (0., 9.6) # [us]

# Position of the NuMI target in detector coordinates
NUMI_TARGET = np.array([31512.0380, 3364.4912, 73363.2532]) # [cm]

# Neutrino interaction current types
CC_TYPE = 0
NC_TYPE = 1

# Muon neutrino PDG code
NUMU_PDG = 14

# Generator interaction modes mapped onto their category
INTERACTION_MODE_CATS = {
    0: 0,  # CCQE
    1: 1,  # CCRes
    10: 2, # CCMEC
    2: 3,  # CCDIS
    3: 4   # CCCoh
}

# Sentinel written in place of infinite values in text output
INF_SENTINEL = -9999

# Index returned when a requested object does not exist
INVAL_IDX = -1
