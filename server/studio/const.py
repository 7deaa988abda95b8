MAX_STYLES_PER_JOB = 10

HEADSHOT_PROMPT = """
Turn this photo into a professional headshot of the same person.
Keep the face, identity, skin tone, hairstyle and expression exactly as
they are in the source photo. Frame the head and shoulders, centered,
looking at the camera. Use soft, even, flattering studio lighting and
keep the result sharp and natural with no artificial smoothing.
Background: {background}.
"""

BACKGROUND_DESCRIPTIONS = {
    "solid_color": "a clean solid {color} backdrop",
    "blurred_office": "a softly blurred modern office, shallow depth of field",
    "gradient": "a smooth gradient from {start} to {end}",
    "studio": "a neutral grey photo studio backdrop with subtle vignette",
}

BACKGROUND_DEFAULTS = {
    "color": "white",
    "start": "light grey",
    "end": "dark grey",
}


def build_prompt(style):
    """Render the generation prompt for a `StyleOption`."""
    params = {**BACKGROUND_DEFAULTS}
    if isinstance(style.background_config, dict):
        params.update({k: v for k, v in style.background_config.items() if isinstance(v, str)})
    template = BACKGROUND_DESCRIPTIONS.get(style.background_type, "{name}")
    background = template.format(name=style.name, **{k: v for k, v in params.items() if k != "name"})
    return HEADSHOT_PROMPT.format(background=background).strip()
