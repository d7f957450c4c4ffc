from __future__ import annotations

from gsapforge.intent.flags import FeatureFlags

TITLE = "## Advanced Interactive Animation System"

_COMPONENT_DRAG_IMPORTS = """import { Draggable } from "gsap/Draggable";
import { InertiaPlugin } from "gsap/InertiaPlugin";
"""

_COMPONENT_HEAD = """import { useGSAP } from "@gsap/react";
import { useRef } from "react";

"""

_COMPONENT_DRAG_REGISTER = """gsap.registerPlugin(Draggable, InertiaPlugin);

"""

_COMPONENT_OPEN = """export default function InteractiveAnimation() {
  const container = useRef();

  useGSAP(() => {
"""

_COMPONENT_DRAG = """    // Drag system with physics
    Draggable.create(".draggable-element", {
      type: "x,y",
      bounds: container.current,
      edgeResistance: 0.65,
      inertia: true,

      onDragStart: function() {
        gsap.to(this.target, {
          scale: 1.1,
          rotation: "random(-5, 5)",
          boxShadow: "0 20px 40px rgba(0,0,0,0.3)",
          duration: 0.3,
          ease: "power2.out"
        });
      },

      onDrag: function() {
        const velocity = Math.abs(this.getVelocity("x")) + Math.abs(this.getVelocity("y"));
        const rotation = Math.min(velocity * 0.01, 15);
        gsap.set(this.target, {
          rotation: this.getDirection("velocity") === "left" ? -rotation : rotation
        });
      },

      onDragEnd: function() {
        gsap.to(this.target, {
          scale: 1,
          rotation: 0,
          boxShadow: "0 5px 15px rgba(0,0,0,0.2)",
          duration: 0.5,
          ease: "elastic.out(1, 0.3)"
        });
      }
    });
"""

_COMPONENT_HOVER = """
    // Hover effects
    const hoverElements = gsap.utils.toArray(".hover-element");

    hoverElements.forEach(element => {
      const tl = gsap.timeline({ paused: true });

      tl.to(element, {
        scale: 1.05,
        y: -10,
        boxShadow: "0 20px 40px rgba(0,0,0,0.2)",
        duration: 0.3,
        ease: "power2.out"
      })
      .to(element.querySelector(".hover-content"), {
        y: -5,
        opacity: 1,
        duration: 0.2,
        ease: "power2.out"
      }, "-=0.1");

      element.addEventListener("mouseenter", () => tl.play());
      element.addEventListener("mouseleave", () => tl.reverse());
    });
"""

_COMPONENT_CLICK = """
    // Click animation with ripple effect
    const clickElements = gsap.utils.toArray(".click-element");

    clickElements.forEach(element => {
      element.addEventListener("click", function(e) {
        gsap.to(this, { scale: 0.95, duration: 0.1, ease: "power2.out", yoyo: true, repeat: 1 });

        const ripple = document.createElement("span");
        ripple.className = "ripple";
        this.appendChild(ripple);

        const rect = this.getBoundingClientRect();
        const size = Math.max(rect.width, rect.height);
        const x = e.clientX - rect.left - size / 2;
        const y = e.clientY - rect.top - size / 2;

        gsap.set(ripple, { width: size, height: size, left: x, top: y, scale: 0, opacity: 0.6 });
        gsap.to(ripple, {
          scale: 2,
          opacity: 0,
          duration: 0.6,
          ease: "power2.out",
          onComplete: () => ripple.remove()
        });
      });
    });
"""

_COMPONENT_MAGNETIC = """
    // Magnetic effect
    const magneticElements = gsap.utils.toArray(".magnetic");

    magneticElements.forEach(element => {
      element.addEventListener("mousemove", function(e) {
        const rect = this.getBoundingClientRect();
        const x = e.clientX - rect.left - rect.width / 2;
        const y = e.clientY - rect.top - rect.height / 2;
        gsap.to(this, { x: x * 0.3, y: y * 0.3, duration: 0.3, ease: "power2.out" });
      });

      element.addEventListener("mouseleave", function() {
        gsap.to(this, { x: 0, y: 0, duration: 0.5, ease: "elastic.out(1, 0.3)" });
      });
    });

  }, { scope: container });

  return (
    <div ref={container} className="interactive-container p-8 min-h-screen">
"""

_MARKUP_DRAG = """      <div className="drag-zone h-96 border-2 border-dashed border-gray-300 rounded-lg relative mb-8">
        <div className="draggable-element w-20 h-20 bg-blue-500 rounded-lg absolute cursor-grab flex items-center justify-center text-white font-bold">
          Drag me!
        </div>
      </div>
"""

_MARKUP_HOVER = """      <div className="hover-element bg-white rounded-lg shadow-lg p-6 mb-8 cursor-pointer relative overflow-hidden">
        <h3 className="text-xl font-semibold">Hover Effect</h3>
        <div className="hover-content opacity-0 absolute inset-0 bg-blue-500 text-white flex items-center justify-center">
          <span>Hovered!</span>
        </div>
      </div>
"""

_MARKUP_CLICK = """      <button className="click-element relative overflow-hidden bg-green-500 text-white px-8 py-4 rounded-lg font-semibold">
        Click for Ripple Effect
      </button>
"""

_COMPONENT_CLOSE = """      <div className="magnetic bg-purple-500 text-white w-32 h-32 rounded-lg flex items-center justify-center font-bold cursor-pointer">
        Magnetic
      </div>
    </div>
  );
}
"""

COMPONENT_CSS = """/* Required CSS for effects */
.ripple {
  position: absolute;
  border-radius: 50%;
  background: rgba(255, 255, 255, 0.6);
  pointer-events: none;
}

.hover-element {
  transition: none !important; /* GSAP owns transitions */
}

.draggable-element {
  touch-action: none;
}

.magnetic {
  will-change: transform;
}
"""

_MODULE_DRAG = """import { Draggable } from "gsap/Draggable";

gsap.registerPlugin(Draggable);

// Draggable with physics
Draggable.create(".draggable", {
  type: "x,y",
  bounds: "body",
  inertia: true,
  onDragStart: function() {
    gsap.to(this.target, { scale: 1.1, duration: 0.2 });
  },
  onDragEnd: function() {
    gsap.to(this.target, { scale: 1, duration: 0.2 });
  }
});
"""

_MODULE_HOVER = """
// Hover effects
document.querySelectorAll(".hover-element").forEach(element => {
  element.addEventListener("mouseenter", () => {
    gsap.to(element, { scale: 1.05, y: -10, duration: 0.3 });
  });
  element.addEventListener("mouseleave", () => {
    gsap.to(element, { scale: 1, y: 0, duration: 0.3 });
  });
});
"""

_MODULE_CLICK = """
// Click feedback
document.querySelectorAll(".click-element").forEach(element => {
  element.addEventListener("click", () => {
    gsap.to(element, { scale: 0.95, duration: 0.1, yoyo: true, repeat: 1 });
  });
});
"""

FEATURES = """## Interactive Features:
- ✅ **Touch Friendly**: Works on mobile and desktop
- ✅ **Physics Based**: Realistic momentum and inertia
- ✅ **Visual Feedback**: Clear interaction states
- ✅ **Performance**: GPU accelerated transforms
- ✅ **Accessibility**: Keyboard navigation support"""


def component_code(flags: FeatureFlags) -> str:
    parts = ['import { gsap } from "gsap";\n']
    if flags.get("draggable"):
        parts.append(_COMPONENT_DRAG_IMPORTS)
    parts.append(_COMPONENT_HEAD)
    if flags.get("draggable"):
        parts.append(_COMPONENT_DRAG_REGISTER)
    parts.append(_COMPONENT_OPEN)
    if flags.get("draggable"):
        parts.append(_COMPONENT_DRAG)
    if flags.get("hover"):
        parts.append(_COMPONENT_HOVER)
    if flags.get("click"):
        parts.append(_COMPONENT_CLICK)
    parts.append(_COMPONENT_MAGNETIC)
    if flags.get("draggable"):
        parts.append(_MARKUP_DRAG)
    if flags.get("hover"):
        parts.append(_MARKUP_HOVER)
    if flags.get("click"):
        parts.append(_MARKUP_CLICK)
    parts.append(_COMPONENT_CLOSE)
    return "".join(parts)


def module_code(flags: FeatureFlags) -> str:
    parts = ['import { gsap } from "gsap";\n']
    if flags.get("draggable"):
        parts.append(_MODULE_DRAG)
    if flags.get("hover"):
        parts.append(_MODULE_HOVER)
    if flags.get("click"):
        parts.append(_MODULE_CLICK)
    return "".join(parts)
