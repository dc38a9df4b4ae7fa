from sfd_beam.domain.results import AnalysisOk
from sfd_beam.engine.analyzer import compute
from sfd_beam.engine.diagrams import shear_at, moment_at

res = compute("10", "100", "5")   # L [m], P [N], a [m]

if not isinstance(res, AnalysisOk):
    print(res.message)
else:
    spec, r = res.spec, res.reactions
    print("Ra [N] =", r.Ra_N)
    print("Rb [N] =", r.Rb_N)
    print("V(0) =", shear_at(spec, r, 0.0))
    print("V(L) =", shear_at(spec, r, spec.L_m))
    print("M(a) =", moment_at(spec, r, spec.a_m))
    print("M(L) =", moment_at(spec, r, spec.L_m))
    print("n muestras =", len(res.grid), "| paso =", res.grid.step)
    print("max |V| =", res.max_shear, "N")
    print("max |M| =", res.max_moment, "Nm")

print(compute("-5", "10", "2"))
