"""iOS overlay: only the values that diverge from the base tree."""

from tokenkit.core.entities import freeze

TOKENS = freeze(
    {
        "typography": {
            "fontWeightMapping": {
                "regular": "400",
                # optical weights for SF Pro
                "medium": "510",
                "semibold": "590",
                "bold": "700",
            },
            "scalingParameters": {
                "title": {"tracking": -0.5, "adaptiveTracking": True},
                "subtitle": {"tracking": -0.25, "adaptiveTracking": True},
                "body": {"tracking": 0, "adaptiveTracking": False},
                "caption": {"tracking": 0.25, "adaptiveTracking": False},
            },
        },
        "layout": {
            "borderRadius": {
                "small": 6,
                "medium": 10,
                "large": 16,
                "pill": 24,
            },
        },
        # iOS draws shadows only; Android-style elevation stays at 0
        "elevation": {
            "none": {
                "shadowOpacity": 0,
                "elevation": 0,
            },
            "low": {
                "shadowColor": "rgba(0,0,0,0.15)",
                "shadowOffset": {"width": 0, "height": 1},
                "shadowOpacity": 0.16,
                "shadowRadius": 6,
                "elevation": 0,
            },
            "medium": {
                "shadowColor": "rgba(0,0,0,0.12)",
                "shadowOffset": {"width": 0, "height": 2.5},
                "shadowOpacity": 0.22,
                "shadowRadius": 8,
                "elevation": 0,
            },
            "high": {
                "shadowColor": "rgba(0,0,0,0.1)",
                "shadowOffset": {"width": 0, "height": 4},
                "shadowOpacity": 0.25,
                "shadowRadius": 12,
                "elevation": 0,
            },
        },
        "components": {
            "header": {
                "height": 44,
                "blurEffect": "systemThinMaterial",
                "blurIntensity": 85,
                "transparency": True,
                "shadowEnabled": True,
                "dynamicTextSize": True,
            },
            "card": {
                "cornerRadiusScale": 1.0,
                "material": "none",
                "shadowType": "natural",
            },
            "tabBar": {
                "height": 49,
                "blurEffect": "systemThinMaterial",
                "blurIntensity": 90,
                "transparency": True,
                "shadowEnabled": True,
            },
            "button": {
                "cornerRadiusScale": 1.0,
                "hapticFeedback": True,
                "activeOpacity": 0.8,
                "pressedStateScale": 0.98,
            },
        },
        "motion": {
            "spring": {
                "default": {"mass": 1, "stiffness": 300, "damping": 30},
                "responsive": {"mass": 1, "stiffness": 200, "damping": 25},
                "energetic": {"mass": 1, "stiffness": 400, "damping": 35},
            },
            "timing": {
                "standard": 250,
                "emphasize": 350,
                "quick": 150,
            },
        },
        "materials": {
            "regular": {
                "blurEffect": "systemMaterial",
                "intensity": 90,
            },
            "thin": {
                "blurEffect": "systemThinMaterial",
                "intensity": 80,
            },
            "ultraThin": {
                "blurEffect": "systemUltraThinMaterial",
                "intensity": 60,
            },
        },
    }
)
