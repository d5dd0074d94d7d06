#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared pytest fixtures for slhakit tests

Provides SLHA text snippets taken from the example files in appendix D of
the SLHA1 paper (arXiv:hep-ph/0311123), plus small synthetic documents for
the repeated-block and error cases.
"""

from __future__ import annotations

import pytest

from slhakit import Document, parse


SLHA_INPUT = """\
# SUSY Les Houches Accord 1.0 - example input file
# Snowmsas point 1a
Block MODSEL  # Select model
     1    1   # sugra
Block SMINPUTS   # Standard Model inputs
     3      0.1172  # alpha_s(MZ) SM MSbar
     5      4.25    # Mb(mb) SM MSbar
     6    174.3     # Mtop(pole)
Block MINPAR  # SUSY breaking input parameters
     3     10.0     # tanb
     4      1.0     # sign(mu)
     1    100.0     # m0
     2    250.0     # m12
     5   -100.0     # A0 """

SLHA_MIXING = """
Block alpha   # Effective Higgs mixing parameter
          -1.13716828e-01   # alpha
Block stopmix  # stop mixing matrix
  1  1     5.37975095e-01   # O_{11}
  1  2     8.42960733e-01   # O_{12}
  2  1     8.42960733e-01   # O_{21}
  2  2    -5.37975095e-01   # O_{22}
Block sbotmix  # sbottom mixing matrix
  1  1     9.47346882e-01   # O_{11}
  1  2     3.20209128e-01   # O_{12}
  2  1    -3.20209128e-01   # O_{21}
  2  2     9.47346882e-01   # O_{22}
"""

SLHA_RUNNING = """
Block Umix  # chargino U mixing matrix
  1  1     9.16207706e-01   # U_{1,1}
  1  2    -4.00703680e-01   # U_{1,2}
  2  1     4.00703680e-01   # U_{2,1}
  2  2     9.16207706e-01   # U_{2,2}
Block gauge Q= 4.64649125e+02
     1     3.60872342e-01   # g'(Q)MSSM DRbar
     2     6.46479280e-01   # g(Q)MSSM DRbar
     3     1.09623002e+00   # g3(Q)MSSM DRbar
Block yu Q= 4.64649125e+02
  3  3     8.88194465e-01   # Yt(Q)MSSM DRbar
Block hmix Q= 4.64649125e+02  # Higgs mixing parameters
     1     3.58660361e+02   # mu(Q)MSSM DRbar
     2     9.75139550e+00   # tan beta(Q)MSSM DRbar
     3     2.44923506e+02   # higgs vev(Q)MSSM DRbar
     4     1.69697051e+04   # [m3^2/cosBsinB](Q)MSSM DRbar
"""

SLHA_DECAY = """\
# SUSY Les Houches Accord 1.0 - example decay file
# Info from decay package
Block DCINFO          # Program information
     1    SDECAY       # Decay package
     2    1.0          # version number
#         PDG           Width
DECAY   1000021    1.01752300e+00   # gluino decays
#          BR         NDA      ID1       ID2
    4.18313300E-02     2     1000001        -1   # BR(~g -> ~d_L dbar)
    1.55587600E-02     2     2000001        -1   # BR(~g -> ~d_R dbar)
    3.91391000E-02     2     1000002        -2   # BR(~g -> ~u_L ubar)
    1.74358200E-02     2     2000002        -2   # BR(~g -> ~u_R ubar)
    4.18313300E-02     2     1000003        -3   # BR(~g -> ~s_L sbar)
    1.55587600E-02     2     2000003        -3   # BR(~g -> ~s_R sbar)
    3.91391000E-02     2     1000004        -4   # BR(~g -> ~c_L cbar)
    1.74358200E-02     2     2000004        -4   # BR(~g -> ~c_R cbar)
    1.13021900E-01     2     1000005        -5   # BR(~g -> ~b_1 bbar)
    6.30339800E-02     2     2000005        -5   # BR(~g -> ~b_2 bbar)
    9.60140900E-02     2     1000006        -6   # BR(~g -> ~t_1 tbar)
    0.00000000E+00     2     2000006        -6   # BR(~g -> ~t_2 tbar)
    4.18313300E-02     2    -1000001         1   # BR(~g -> ~dbar_L d)
    1.55587600E-02     2    -2000001         1   # BR(~g -> ~dbar_R d)
    3.91391000E-02     2    -1000002         2   # BR(~g -> ~ubar_L u)
    1.74358200E-02     2    -2000002         2   # BR(~g -> ~ubar_R u)
    4.18313300E-02     2    -1000003         3   # BR(~g -> ~sbar_L s)
    1.55587600E-02     2    -2000003         3   # BR(~g -> ~sbar_R s)
    3.91391000E-02     2    -1000004         4   # BR(~g -> ~cbar_L c)
    1.74358200E-02     2    -2000004         4   # BR(~g -> ~cbar_R c)
"""

SLHA_TOP = """\
BLOCK MASS   # Mass spectrum
    6   173.2   # M_t
DECAY 6 1.35   # top quark
    1.0   2   5   24   # t -> b W+
"""

SLHA_REPEATED = """\
BLOCK ye Q= 1
    3 3 4.2
BLOCK ye Q= 2
    3 3 8.4
BLOCK nmix
    1 1 0.98
BLOCK nmix
    1 1 0.97
"""


@pytest.fixture
def slha_input() -> str:
    """SLHA1 example input file (appendix D.1)"""
    return SLHA_INPUT


@pytest.fixture
def slha_mixing() -> str:
    """ALPHA and sfermion mixing blocks (appendix D.2)"""
    return SLHA_MIXING


@pytest.fixture
def slha_running() -> str:
    """Mixing and running-parameter blocks with Q= scales (appendix D.2)"""
    return SLHA_RUNNING


@pytest.fixture
def slha_decay() -> str:
    """DCINFO block and the gluino decay table (appendix D.3)"""
    return SLHA_DECAY


@pytest.fixture
def slha_top() -> str:
    """Top mass and a single-channel top decay"""
    return SLHA_TOP


@pytest.fixture
def slha_repeated() -> str:
    """YE at two distinct scales and NMIX twice without a scale"""
    return SLHA_REPEATED


@pytest.fixture
def decay_doc(slha_decay: str) -> Document:
    """Parsed :data:`SLHA_DECAY`"""
    return parse(slha_decay)


@pytest.fixture
def repeated_doc(slha_repeated: str) -> Document:
    """Parsed :data:`SLHA_REPEATED`"""
    return parse(slha_repeated)


@pytest.fixture
def slha_file(tmp_path, slha_decay: str, slha_top: str, slha_repeated: str):
    """Spectrum file on disk combining the decay, top and repeated snippets"""
    path = tmp_path / "spectrum.slha"
    path.write_text(slha_decay + slha_top + slha_repeated, encoding="utf-8")
    return path
