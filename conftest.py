# Test session setup: headless matplotlib and an importable `examples`
# directory (pytest puts the directory of this file on sys.path).
import matplotlib

matplotlib.use("Agg")
