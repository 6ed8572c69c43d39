"""Prompt construction for UI mockup images."""

from __future__ import annotations

from typing import Dict


UI_STYLE_DESCRIPTIONS: Dict[str, str] = {
    "modern": "sleek, contemporary design with clean lines and vibrant colors",
    "minimal": "minimalist design with lots of white space and subtle colors",
    "professional": "professional corporate design with business-appropriate colors",
    "playful": "playful and colorful design with fun elements and bright colors",
    "dark": "dark mode interface with dark background and accent colors",
    "glassmorphism": "glassmorphism design with frosted glass effects and transparency",
}

UI_TYPE_DESCRIPTIONS: Dict[str, str] = {
    "mobile app": "mobile application interface with typical mobile UI patterns",
    "web app": "web application interface with desktop layout",
    "dashboard": "analytics dashboard with charts, graphs, and data visualizations",
    "landing page": "marketing landing page with hero section and call-to-action",
    "e-commerce": "e-commerce product page or shopping interface",
    "social media": "social media feed or profile interface",
}

_UI_QUALITY_CLAUSES = (
    "The interface should be pixel-perfect with proper spacing, typography, and visual hierarchy.",
    "Include realistic UI elements like buttons, input fields, navigation, icons, and content.",
    "Professional UI/UX design quality with attention to detail.",
    "Sharp, crisp rendering suitable for presentation or mockup.",
    "NO code, NO Lorem Ipsum placeholder text, use realistic content.",
    "NO watermarks or labels.",
)


def build_ui_prompt(description: str, style: str = "modern", ui_type: str = "web app") -> str:
    sentences = [
        f"A high-quality UI design screenshot of a {ui_type}.",
        f"{description.strip().rstrip('.')}.",
    ]
    style_description = UI_STYLE_DESCRIPTIONS.get(style)
    if style_description:
        sentences.append(f"The design features a {style_description}.")
    type_description = UI_TYPE_DESCRIPTIONS.get(ui_type)
    if type_description:
        sentences.append(f"This is a {type_description}.")
    sentences.extend(_UI_QUALITY_CLAUSES)
    return " ".join(sentences)
