"""
QR module constants.
"""

QR_SIZES = (128, 256, 512)

# (name, hex) pairs offered by the share dialog. The names are accepted
# anywhere a QR color is, and take precedence over CSS color names.
QR_COLOR_PRESETS = (
    ("Black", "#000000"),
    ("Blue", "#3B82F6"),
    ("Green", "#10B981"),
    ("Purple", "#8B5CF6"),
    ("Red", "#EF4444"),
)
