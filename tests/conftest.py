import matplotlib

# Headless backend for the --plot tests
matplotlib.use("Agg")
