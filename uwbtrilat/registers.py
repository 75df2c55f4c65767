"""Register map of the DW1000 ultra-wideband transceiver.

Register files are addressed by a six-bit identifier. Some may be
followed by a sub-address. The identifiers, lengths, sub-addresses and
bit positions here are the ones the ranging firmware uses.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "IDLE_MODE",
    "JUNK",
    "LEN_EXT_UWB_FRAMES",
    "LEN_STAMP",
    "LEN_UWB_FRAMES",
    "NO_SUB",
    "RX_MODE",
    "TX_MODE",
    "Register",
    "StatusBit",
    "bit_mask",
    "register_length",
]

# Length in bytes of every 40-bit device time stamp.
LEN_STAMP = 5

# Device modes.
IDLE_MODE = 0x00
RX_MODE = 0x01
TX_MODE = 0x02

# Byte clocked out while only reading over SPI.
JUNK = 0x00

# Marker for a register access without a sub-address.
NO_SUB = 0xFF

# Frame length limits.
LEN_UWB_FRAMES = 127
LEN_EXT_UWB_FRAMES = 1023

# SYS_CFG bits and fields.
FFEN_BIT = 0
FFBC_BIT = 1
FFAB_BIT = 2
FFAD_BIT = 3
FFAA_BIT = 4
FFAM_BIT = 5
FFAR_BIT = 6
HIRQ_POL_BIT = 9
DIS_DRXB_BIT = 12
PHR_MODE_SUB = 16
LEN_PHR_MODE_SUB = 2
DIS_STXP_BIT = 18
RXM110K_BIT = 22
RXAUTR_BIT = 29

# SYS_CTRL bits.
SFCST_BIT = 0
TXSTRT_BIT = 1
TXDLYS_BIT = 2
TRXOFF_BIT = 6
WAIT4RESP_BIT = 7
RXENAB_BIT = 8
RXDLYS_BIT = 9

# RX_TIME and RX_FQUAL sub-registers.
RX_STAMP_SUB = 0x00
FP_AMPL1_SUB = 0x07
LEN_RX_STAMP = LEN_STAMP
LEN_FP_AMPL1 = 2
STD_NOISE_SUB = 0x00
FP_AMPL2_SUB = 0x02
FP_AMPL3_SUB = 0x04
CIR_PWR_SUB = 0x06
LEN_STD_NOISE = 2
LEN_FP_AMPL2 = 2
LEN_FP_AMPL3 = 2
LEN_CIR_PWR = 2

# TX_TIME sub-register.
TX_STAMP_SUB = 0
LEN_TX_STAMP = LEN_STAMP

# CHAN_CTRL bits.
DWSFD_BIT = 17
TNSSFD_BIT = 20
RNSSFD_BIT = 21

# USR_SFD sub-register.
SFD_LENGTH_SUB = 0x00
LEN_SFD_LENGTH = 1

# OTP_IF sub-registers.
OTP_ADDR_SUB = 0x04
OTP_CTRL_SUB = 0x06
OTP_RDAT_SUB = 0x0A
LEN_OTP_ADDR = 2
LEN_OTP_CTRL = 2
LEN_OTP_RDAT = 4

# AGC_TUNE sub-registers.
AGC_TUNE1_SUB = 0x04
AGC_TUNE2_SUB = 0x0C
AGC_TUNE3_SUB = 0x12
LEN_AGC_TUNE1 = 2
LEN_AGC_TUNE2 = 4
LEN_AGC_TUNE3 = 2

# DRX_TUNE sub-registers.
DRX_TUNE0b_SUB = 0x02
DRX_TUNE1a_SUB = 0x04
DRX_TUNE1b_SUB = 0x06
DRX_TUNE2_SUB = 0x08
DRX_TUNE4H_SUB = 0x26
LEN_DRX_TUNE0b = 2
LEN_DRX_TUNE1a = 2
LEN_DRX_TUNE1b = 2
LEN_DRX_TUNE2 = 4
LEN_DRX_TUNE4H = 2

# LDE_IF sub-registers.
LDE_CFG1_SUB = 0x0806
LDE_RXANTD_SUB = 0x1804
LDE_CFG2_SUB = 0x1806
LDE_REPC_SUB = 0x2804
LEN_LDE_CFG1 = 1
LEN_LDE_CFG2 = 2
LEN_LDE_REPC = 2
LEN_LDE_RXANTD = 2

# RF_CONF sub-registers.
RF_RXCTRLH_SUB = 0x0B
RF_TXCTRL_SUB = 0x0C
LEN_RF_RXCTRLH = 1
LEN_RF_TXCTRL = 4

# TX_CAL sub-registers.
TC_PGDELAY_SUB = 0x0B
LEN_TC_PGDELAY = 1
TC_SARC = 0x00
TC_SARL = 0x03

# FS_CTRL sub-registers.
FS_PLLCFG_SUB = 0x07
FS_PLLTUNE_SUB = 0x0B
FS_XTALT_SUB = 0x0E
LEN_FS_PLLCFG = 4
LEN_FS_PLLTUNE = 1
LEN_FS_XTALT = 1

# AON sub-registers and bits.
AON_WCFG_SUB = 0x00
LEN_AON_WCFG = 2
ONW_LDC_BIT = 6
ONW_LDD0_BIT = 12
AON_CTRL_SUB = 0x02
LEN_AON_CTRL = 1
RESTORE_BIT = 0
SAVE_BIT = 1
UPL_CFG_BIT = 2
AON_CFG0_SUB = 0x06
LEN_AON_CFG0 = 4
SLEEP_EN_BIT = 0
WAKE_PIN_BIT = 1
WAKE_SPI_BIT = 2
WAKE_CNT_BIT = 3

# PMSC sub-registers and bits.
PMSC_CTRL0_SUB = 0x00
PMSC_CTRL1_SUB = 0x04
PMSC_LEDC_SUB = 0x28
LEN_PMSC_CTRL0 = 4
LEN_PMSC_CTRL1 = 4
LEN_PMSC_LEDC = 4
BLNKEN = 8
ATXSLP_BIT = 11
ARXSLP_BIT = 12
GPDCE_BIT = 18
KHZCLKEN_BIT = 23

# GPIO_CTRL sub-register and pin mode field offsets.
GPIO_MODE_SUB = 0x00
LEN_GPIO_MODE = 4
MSGP0 = 6
MSGP1 = 8
MSGP2 = 10
MSGP3 = 12
MSGP4 = 14
MSGP5 = 16
MSGP6 = 18
MSGP7 = 20
MSGP8 = 22
GPIO_MODE = 0
LED_MODE = 1


class Register(IntEnum):
    """Register file identifiers."""

    DEV_ID = 0x00
    EUI = 0x01
    PANADR = 0x03
    SYS_CFG = 0x04
    SYS_TIME = 0x06
    TX_FCTRL = 0x08
    TX_BUFFER = 0x09
    DX_TIME = 0x0A
    SYS_CTRL = 0x0D
    SYS_MASK = 0x0E
    SYS_STATUS = 0x0F
    RX_FINFO = 0x10
    RX_BUFFER = 0x11
    RX_FQUAL = 0x12
    RX_TIME = 0x15
    TX_TIME = 0x17
    TX_ANTD = 0x18
    TX_POWER = 0x1E
    CHAN_CTRL = 0x1F
    USR_SFD = 0x21
    AGC_TUNE = 0x23
    GPIO_CTRL = 0x26
    DRX_TUNE = 0x27
    RF_CONF = 0x28
    TX_CAL = 0x2A
    FS_CTRL = 0x2B
    AON = 0x2C
    OTP_IF = 0x2D
    LDE_IF = 0x2E
    PMSC = 0x36


class StatusBit(IntEnum):
    """Event bits of SYS_STATUS; those below 32 also apply to SYS_MASK."""

    CPLOCK = 1
    AAT = 3
    TXFRB = 4
    TXPRS = 5
    TXPHS = 6
    TXFRS = 7
    LDEDONE = 10
    RXPHE = 12
    RXDFR = 13
    RXFCG = 14
    RXFCE = 15
    RXRFSL = 16
    RXRFTO = 17
    LDEERR = 18
    RXPTO = 21
    RFPLL_LL = 24
    CLKPLL_LL = 25
    RXSFDTO = 26


_LENGTHS: dict[Register, int] = {
    Register.DEV_ID: 4,
    Register.EUI: 8,
    Register.PANADR: 4,
    Register.SYS_CFG: 4,
    Register.SYS_TIME: LEN_STAMP,
    Register.TX_FCTRL: 5,
    Register.TX_BUFFER: 1024,
    Register.DX_TIME: LEN_STAMP,
    Register.SYS_CTRL: 4,
    Register.SYS_MASK: 4,
    Register.SYS_STATUS: 5,
    Register.RX_FINFO: 4,
    Register.RX_BUFFER: 1024,
    Register.RX_FQUAL: 8,
    Register.RX_TIME: 14,
    Register.TX_TIME: 10,
    Register.TX_ANTD: 2,
    Register.TX_POWER: 4,
    Register.CHAN_CTRL: 4,
    Register.USR_SFD: 41,
}


def register_length(register: Register | int) -> int:
    """Return the length in bytes of a register accessed as a whole.

    Raises ValueError for an unknown identifier, or for a register that
    is only accessed through its sub-addresses.
    """
    reg = Register(register)
    try:
        return _LENGTHS[reg]
    except KeyError:
        raise ValueError(
            f"register {reg.name} is accessed only through sub-addresses"
        ) from None


def bit_mask(bit: StatusBit | int) -> int:
    """Return the integer mask with only bit ``bit`` set."""
    position = int(bit)
    if position < 0:
        raise ValueError("bit position cannot be negative")
    return 1 << position