from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger("gsapforge.environment")

DEFAULT_PLUGINS = ("ScrollTrigger", "SplitText")
DEFAULT_PERFORMANCE_LEVEL = "optimized"
COMPONENT_FRAMEWORKS = {"react", "nextjs"}
TUNED_LEVELS = {"60fps-guaranteed", "mobile-first"}

# Registered in full by the component setup regardless of the requested list.
FULL_PLUGIN_ROSTER = (
    "ScrollTrigger",
    "SplitText",
    "DrawSVGPlugin",
    "MorphSVGPlugin",
    "MotionPathPlugin",
    "ScrambleTextPlugin",
    "Draggable",
    "InertiaPlugin",
    "Flip",
    "Observer",
    "CustomEase",
    "CustomBounce",
    "CustomWiggle",
    "GSDevTools",
    "Physics2DPlugin",
    "TextPlugin",
    "ScrollToPlugin",
)

CRITICAL_CSS = """/* Critical CSS for smooth animations */
.animated-element {
  will-change: transform, opacity;
  backface-visibility: hidden;
  transform: translateZ(0); /* Force GPU layer */
}

/* Reduce motion for accessibility */
@media (prefers-reduced-motion: reduce) {
  .animated-element {
    animation: none !important;
    transition: none !important;
  }
}"""

PERFORMANCE_DEFAULTS = """// Performance monitoring
const performanceConfig = {
  // Force GPU acceleration
  force3D: true,
  // Clear properties after animation
  clearProps: "transform,opacity",
  // Optimize for mobile
  lazy: false,
  // Batch DOM reads/writes
  invalidateOnRefresh: true
};

// Apply to all animations
gsap.defaults(performanceConfig);"""

SCROLL_BATCH_SNIPPET = """    // ScrollTrigger example
    ScrollTrigger.batch(".scroll-item", {
      onEnter: elements => gsap.from(elements, {
        y: 100,
        opacity: 0,
        stagger: 0.15,
        duration: 1.2,
        ease: "power3.out"
      })
    });
"""

READY_PATTERNS = """### Scroll Reveal System
```javascript
ScrollTrigger.batch(".reveal", {
  onEnter: elements => gsap.from(elements, {
    y: 100, opacity: 0, stagger: 0.15, duration: 1
  }),
  start: "top 80%"
});
```

### Text Animation
```javascript
const split = new SplitText(".title", { type: "chars" });
gsap.from(split.chars, {
  y: 100, opacity: 0, stagger: 0.02, duration: 0.8
});
```"""


def normalize_plugins(raw: Any) -> list[str]:
    if raw is None:
        return list(DEFAULT_PLUGINS)
    if isinstance(raw, str):
        raw = raw.split(",")
    plugins: list[str] = []
    for item in raw:
        name = str(item).strip()
        if name and name not in plugins:
            plugins.append(name)
    return plugins


def component_setup(plugins: list[str]) -> str:
    imports = "\n".join(f'import {{ {name} }} from "gsap/{name}";' for name in FULL_PLUGIN_ROSTER)
    registered = ",\n".join(f"  {name}" for name in FULL_PLUGIN_ROSTER)
    scroll_snippet = SCROLL_BATCH_SNIPPET if "ScrollTrigger" in plugins else ""
    return f"""// GSAP Master Setup - React/Next.js
import {{ gsap }} from "gsap";
import {{ useGSAP }} from "@gsap/react";
import {{ useRef }} from "react";

{imports}

// Register all plugins
gsap.registerPlugin(
  useGSAP,
{registered}
);

// Master Animation Component
export default function AnimationMaster() {{
  const container = useRef();

  useGSAP(() => {{
    // Your animations here
    gsap.from(".animate-in", {{
      y: 50,
      opacity: 0,
      duration: 1,
      stagger: 0.2,
      ease: "power3.out",
      force3D: true
    }});

{scroll_snippet}  }}, {{ scope: container }});

  return (
    <div ref={{container}}>
      <div className="animate-in">Content 1</div>
      <div className="animate-in">Content 2</div>
      <div className="scroll-item">Scroll Item</div>
    </div>
  );
}}"""


def module_setup(plugins: list[str]) -> str:
    lines = ["// GSAP Master Setup - Vanilla JS", 'import { gsap } from "gsap";']
    lines.extend(f'import {{ {name} }} from "gsap/{name}";' for name in plugins)
    lines.append("")
    if plugins:
        lines.extend(["// Register plugins", f"gsap.registerPlugin({', '.join(plugins)});", ""])
    lines.extend(
        [
            "// Initialize animations",
            'gsap.from(".animate-in", {',
            "  y: 50,",
            "  opacity: 0,",
            "  duration: 1,",
            "  stagger: 0.2,",
            '  ease: "power3.out"',
            "});",
        ]
    )
    return "\n".join(lines)


def generate_setup(arguments: dict[str, Any]) -> str:
    framework = str(arguments["framework"]).strip()
    plugins = normalize_plugins(arguments.get("plugins"))
    level = str(arguments.get("performance_level") or DEFAULT_PERFORMANCE_LEVEL).strip()
    component = framework.lower() in COMPONENT_FRAMEWORKS
    logger.info("setup for %s with %d plugin(s) at %s", framework, len(plugins), level)

    install = "npm install gsap @gsap/react" if component else "npm install gsap"
    code = component_setup(plugins) if component else module_setup(plugins)
    lines = [
        f"# 🚀 Complete GSAP Setup - {framework.upper()}",
        "",
        "## 📦 Installation",
        "",
        "```bash",
        install,
        "```",
        "",
        "## ⚡ Complete Setup with All Plugins" if component else "## ⚡ Setup with Requested Plugins",
        "",
        "```javascript",
        code,
        "```",
        "",
    ]
    if level in TUNED_LEVELS:
        lines.extend([f"## 🔧 Performance Optimizations ({level})", ""])
        lines.extend(["```css", CRITICAL_CSS, "```", "", "```javascript", PERFORMANCE_DEFAULTS, "```", ""])

    lines.extend(["## 🎯 Ready-to-Use Patterns", "", READY_PATTERNS, ""])
    lines.extend(
        [
            "## 📱 Mobile Optimization",
            "- ✅ Touch-friendly interactions",
            "- ✅ Reduced complexity on mobile",
            "- ✅ Battery-efficient animations",
            "- ✅ Respects motion preferences",
            "",
            "## 🎨 All Plugins Available (100% FREE!)",
            "Thanks to Webflow, all GSAP plugins are now completely free:",
            "- **ScrollTrigger** - Scroll-based animations",
            "- **SplitText** - Advanced text effects",
            "- **DrawSVG** - SVG path animations",
            "- **MorphSVG** - Shape morphing",
            "- **Draggable** - Drag and drop",
            "- **And many more!** 🎉",
        ]
    )
    return "\n".join(lines)


__all__ = ["FULL_PLUGIN_ROSTER", "generate_setup", "normalize_plugins"]
