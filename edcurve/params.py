"""Parameters of the Edwards curve E_{1,d}(Fq), its twist over Fq3 and the pairing."""

from edcurve.fields import Fq, Fq3

COEFF_A = Fq.one()
COEFF_D = Fq(600581931845324488256649384912508268813600056237543024)

TWIST = Fq3(Fq.zero(), Fq.one(), Fq.zero())
TWIST_COEFF_A = COEFF_A * TWIST
TWIST_COEFF_D = COEFF_D * TWIST
TWIST_MUL_BY_A_C0 = COEFF_A * Fq3.non_residue
TWIST_MUL_BY_A_C1 = COEFF_A
TWIST_MUL_BY_A_C2 = COEFF_A
TWIST_MUL_BY_D_C0 = COEFF_D * Fq3.non_residue
TWIST_MUL_BY_D_C1 = COEFF_D
TWIST_MUL_BY_D_C2 = COEFF_D
TWIST_MUL_BY_Q_Y = Fq(1073752683758513276629212192812154536507607213288832062)
TWIST_MUL_BY_Q_Z = Fq(1073752683758513276629212192812154536507607213288832062)

# Affine (x, y) of the neutral element and of the generator of G1.
G1_ZERO_XY = (Fq.zero(), Fq.one())
G1_ONE_XY = (
    Fq(3713709671941291996998665608188072510389821008693530490),
    Fq(4869953702976555123067178261685365085639705297852816679),
)
G1_WNAF_WINDOW_TABLE = (9, 14, 24, 117)
G1_FIXED_BASE_EXP_WINDOW_TABLE = (
    1, 4, 10, 25, 60, 149, 370, 849, 1765, 4430, 13389, 15368, 74912, 0,
    438107, 0, 1045626, 1577434, 0, 0, 17350594, 0,
)

# Affine (x, y) of the neutral element and of the generator of G2.
G2_ZERO_XY = (Fq3.zero(), Fq3.one())
G2_ONE_XY = (
    Fq3(
        Fq(4531683359223370252210990718516622098304721701253228128),
        Fq(5339624155305731263217400504407647531329993548123477368),
        Fq(3964037981777308726208525982198654699800283729988686552),
    ),
    Fq3(
        Fq(364634864866983740775341816274081071386963546650700569),
        Fq(3264380230116139014996291397901297105159834497864380415),
        Fq(3504781284999684163274269077749440837914479176282903747),
    ),
)
G2_WNAF_WINDOW_TABLE = (6, 12, 42, 97)
G2_FIXED_BASE_EXP_WINDOW_TABLE = (
    1, 5, 11, 26, 61, 146, 357, 823, 1589, 4136, 14298, 16745, 51769, 99811,
    193307, 0, 907185, 1389683, 0, 6752696, 193642895, 226760202,
)

ATE_LOOP_COUNT = 4492509698523932320491110403
FINAL_EXPONENT = int(
    "36943107177961694649618797346446870138748651578611748415128207429491593976636391130175425245705674550269561361208979548749447898941828686017765730419416875539615941651269793928962468899856083169227457503942470721108165443528513330156264699608120624990672333642644221591552000"
)
FINAL_EXPONENT_LAST_CHUNK_ABS_OF_W0 = 17970038794095729281964441603
FINAL_EXPONENT_LAST_CHUNK_IS_W0_NEG = True
FINAL_EXPONENT_LAST_CHUNK_W1 = 4