import numpy as np
import matplotlib.pyplot as plt

from rheonet.model import Series, Spring, Dashpot
from rheonet.kernel.response import compute_creep, compute_relaxation


def main():
    # Maxwell: spring E in series with dashpot eta
    E = 100.0
    eta = 50.0
    sigma0 = 1.0
    eps0 = 1.0
    t_max = 10.0
    n_points = 200

    model = Series("root", (Spring("s1", E), Dashpot("d1", eta)))

    creep = compute_creep(model, t_max, n_points, sigma0)
    relax = compute_relaxation(model, t_max, n_points, eps0)

    t = np.array([p.t for p in creep])
    strain = np.array([p.value for p in creep])
    stress = np.array([p.value for p in relax])

    # Closed forms
    strain_expected = sigma0 * (1.0 / E + t / eta)
    stress_expected = eps0 * E * np.exp(-E * t / eta)

    print("Strain at t=0:", strain[0], "expected:", sigma0 / E)
    print("Strain at t=t_max:", strain[-1], "expected:", strain_expected[-1])
    print("Max creep error:", np.max(np.abs(strain - strain_expected)))
    print("Max relaxation error (t>0):", np.max(np.abs(stress[1:] - stress_expected[1:])))

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 4))
    ax1.plot(t, strain, label="Stehfest")
    ax1.plot(t, strain_expected, "--", label="closed form")
    ax1.set_title("Maxwell creep")
    ax1.set_xlabel("t")
    ax1.set_ylabel("strain")
    ax1.legend()
    ax2.plot(t[1:], stress[1:], label="Stehfest")
    ax2.plot(t[1:], stress_expected[1:], "--", label="closed form")
    ax2.set_title("Maxwell relaxation")
    ax2.set_xlabel("t")
    ax2.set_ylabel("stress")
    ax2.legend()
    plt.show()


if __name__ == "__main__":
    main()
