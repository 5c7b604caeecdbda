"""Per-sample DSP units: comb, resonant and band-pass filters."""