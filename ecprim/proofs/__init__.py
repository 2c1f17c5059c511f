"""Non-interactive sigma proofs built with the Fiat-Shamir transform."""