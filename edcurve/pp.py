"""The public parameters of the Edwards curve: its types and pairing operations."""

from __future__ import annotations

from edcurve import ate, tate
from edcurve.ate import AteG1Precomp
from edcurve.fields import Fq, Fq3, Fq6, Fr
from edcurve.g1 import G1
from edcurve.g2 import G2


class EdwardsPP:
    """Bundle of the Edwards curve's groups, fields and pairing functions."""

    Fp_type = Fr
    G1_type = G1
    G2_type = G2
    G1_precomp_type = AteG1Precomp
    G2_precomp_type = list
    Fq_type = Fq
    Fqe_type = Fq3
    Fqk_type = Fq6
    GT_type = Fq6

    has_affine_pairing = False

    @staticmethod
    def final_exponentiation(elt):
        return tate.final_exponentiation(elt)

    @staticmethod
    def precompute_g1(p):
        return ate.precompute_g1(p)

    @staticmethod
    def precompute_g2(q):
        return ate.precompute_g2(q)

    @staticmethod
    def miller_loop(prec_p, prec_q):
        return ate.miller_loop(prec_p, prec_q)

    @staticmethod
    def double_miller_loop(prec_p1, prec_q1, prec_p2, prec_q2):
        return ate.double_miller_loop(prec_p1, prec_q1, prec_p2, prec_q2)

    @staticmethod
    def pairing(p, q):
        return ate.pairing(p, q)

    @staticmethod
    def reduced_pairing(p, q):
        return ate.reduced_pairing(p, q)