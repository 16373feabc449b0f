"""Core calculation utilities.

Pure loan math, input models, presets and embed theming.  Nothing in this
package touches Streamlit."""
