"""Interface adapters: Streamlit UI and command-line tools."""
