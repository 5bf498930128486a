"""Android overlay following Material Design 3 metrics."""

from tokenkit.core.entities import freeze

TOKENS = freeze(
    {
        "typography": {
            "fontWeightMapping": {
                "regular": "400",
                "medium": "500",
                "semibold": "600",
                "bold": "700",
            },
            "scalingParameters": {
                "title": {"tracking": 0, "adaptiveTracking": False},
                "subtitle": {"tracking": 0.15, "adaptiveTracking": False},
                "body": {"tracking": 0.5, "adaptiveTracking": False},
                "caption": {"tracking": 0.4, "adaptiveTracking": False},
            },
        },
        "layout": {
            "borderRadius": {
                "small": 4,
                "medium": 8,
                "large": 16,
                "pill": 28,
            },
        },
        # Android relies on native elevation; shadow props are zeroed
        "elevation": {
            "none": {
                "shadowOpacity": 0,
                "elevation": 0,
            },
            "low": {
                "shadowColor": "#000",
                "shadowOffset": {"width": 0, "height": 1},
                "shadowOpacity": 0,
                "shadowRadius": 0,
                "elevation": 2,
            },
            "medium": {
                "shadowColor": "#000",
                "shadowOffset": {"width": 0, "height": 0},
                "shadowOpacity": 0,
                "shadowRadius": 0,
                "elevation": 4,
            },
            "high": {
                "shadowColor": "#000",
                "shadowOffset": {"width": 0, "height": 0},
                "shadowOpacity": 0,
                "shadowRadius": 0,
                "elevation": 8,
            },
        },
        "components": {
            "header": {
                "height": 56,
                "blurEffect": None,
                "blurIntensity": 0,
                "transparency": False,
                "shadowEnabled": False,
                "dynamicTextSize": False,
            },
            "card": {
                "cornerRadiusScale": 1.0,
                "material": "none",
                "shadowType": "elevation",
            },
            "tabBar": {
                "height": 56,
                "blurEffect": None,
                "blurIntensity": 0,
                "transparency": False,
                "shadowEnabled": False,
            },
            "button": {
                "cornerRadiusScale": 1.0,
                "hapticFeedback": False,
                "activeOpacity": 0.7,
                # pressed state uses the ripple rather than scaling
                "pressedStateScale": 1.0,
                "rippleEffect": True,
                "rippleColor": "rgba(0,0,0,0.12)",
            },
        },
        "motion": {
            "spring": {
                "default": {"mass": 1, "stiffness": 280, "damping": 26},
                "responsive": {"mass": 1, "stiffness": 180, "damping": 22},
                "energetic": {"mass": 1, "stiffness": 380, "damping": 30},
            },
            "timing": {
                "standard": 300,
                "emphasize": 400,
                "quick": 200,
            },
        },
    }
)
