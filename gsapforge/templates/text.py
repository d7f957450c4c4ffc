from __future__ import annotations

from gsapforge.intent.flags import FeatureFlags

TITLE = "## Advanced Text Animation System"

_COMPONENT_IMPORTS = """import { gsap } from "gsap";
import { SplitText } from "gsap/SplitText";
import { useGSAP } from "@gsap/react";
import { useRef } from "react";

gsap.registerPlugin(SplitText);

export default function TextAnimation() {
  const container = useRef();

  useGSAP(() => {
"""

_COMPONENT_TYPEWRITER = """    // Typewriter effect
    const split = new SplitText(".typewriter-text", { type: "chars" });

    gsap.set(split.chars, { opacity: 0 });

    gsap.to(split.chars, {
      opacity: 1,
      duration: 0.05,
      stagger: 0.05,
      ease: "none",
      onComplete: () => {
        // Blinking cursor
        gsap.to(".cursor", {
          opacity: 0,
          duration: 0.5,
          repeat: -1,
          yoyo: true,
          ease: "power2.inOut"
        });
      }
    });
"""

_COMPONENT_CHARS = """    // Character reveal animation
    const split = new SplitText(".char-reveal", { type: "chars" });

    gsap.fromTo(split.chars,
      { y: 100, opacity: 0, rotation: 10, scale: 0.8 },
      {
        y: 0,
        opacity: 1,
        rotation: 0,
        scale: 1,
        duration: 0.8,
        ease: "back.out(1.7)",
        stagger: { amount: 1.2, from: "random" },
        force3D: true
      }
    );
"""

_COMPONENT_WORDS = """    // Word by word reveal
    const split = new SplitText(".word-reveal", { type: "words" });

    gsap.fromTo(split.words,
      { x: -50, opacity: 0, rotationX: -90 },
      {
        x: 0,
        opacity: 1,
        rotationX: 0,
        duration: 0.8,
        ease: "power3.out",
        stagger: 0.1,
        transformOrigin: "center bottom",
        force3D: true
      }
    );
"""

_COMPONENT_LINES = """    // Line by line reveal
    const split = new SplitText(".line-reveal", { type: "lines" });

    gsap.fromTo(split.lines,
      { y: 100, opacity: 0 },
      { y: 0, opacity: 1, duration: 1, ease: "power3.out", stagger: 0.2, force3D: true }
    );
"""

_COMPONENT_LAYERED = """
    // Multi-layer animation
    const complexSplit = new SplitText(".complex-text", { type: "chars,words,lines" });
    const tl = gsap.timeline();

    tl.fromTo(complexSplit.lines,
      { y: 100, opacity: 0 },
      { y: 0, opacity: 1, duration: 0.8, stagger: 0.1, ease: "power3.out" }
    )
    .fromTo(complexSplit.words,
      { scale: 0 },
      { scale: 1, duration: 0.5, stagger: 0.05, ease: "back.out(1.7)" },
      "-=0.5"
    )
    .fromTo(complexSplit.chars,
      { rotation: 90, color: "#ff0000" },
      { rotation: 0, color: "#000000", duration: 0.3, stagger: 0.01 },
      "-=0.8"
    );

    // Simplified animation for small screens
    const handleResize = () => {
      if (window.innerWidth < 768) {
        gsap.set(".complex-text", { clearProps: "all" });
        gsap.from(".complex-text", { y: 30, opacity: 0, duration: 1 });
      }
    };

    window.addEventListener("resize", handleResize);

    return () => {
      window.removeEventListener("resize", handleResize);
    };

  }, { scope: container });

  return (
    <div ref={container} className="text-container p-8">
"""

_MARKUP_TYPEWRITER = """      <div className="typewriter-container">
        <h1 className="typewriter-text text-4xl font-bold">
          Hello, I'm a typewriter effect!
        </h1>
        <span className="cursor text-4xl">|</span>
      </div>
"""

_MARKUP_CHARS = """      <h1 className="char-reveal text-6xl font-bold text-center">
        CHARACTER REVEAL
      </h1>
"""

_MARKUP_WORDS = """      <h2 className="word-reveal text-3xl text-center max-w-2xl mx-auto">
        This text reveals word by word with beautiful timing and effects
      </h2>
"""

_MARKUP_LINES = """      <div className="line-reveal text-xl leading-relaxed max-w-4xl">
        <p>This is the first line of text that will animate in.</p>
        <p>This is the second line with a slight delay.</p>
        <p>And this is the third line completing the sequence.</p>
      </div>
"""

_COMPONENT_CLOSE = """
      <div className="complex-text mt-12 text-center">
        <h3 className="text-2xl font-semibold">Complex Multi-Layer Animation</h3>
        <p className="text-lg mt-4">Lines, words, and characters all animated together</p>
      </div>
    </div>
  );
}
"""

_MODULE_IMPORTS = """import { gsap } from "gsap";
import { SplitText } from "gsap/SplitText";

gsap.registerPlugin(SplitText);

"""

_MODULE_TYPEWRITER = """// Typewriter effect
const split = new SplitText(".typewriter-text", { type: "chars" });
gsap.set(split.chars, { opacity: 0 });
gsap.to(split.chars, {
  opacity: 1,
  duration: 0.05,
  stagger: 0.05,
  ease: "none"
});
"""

_MODULE_CHARS = """// Character reveal
const split = new SplitText(".char-reveal", { type: "chars" });
gsap.from(split.chars, {
  y: 100,
  opacity: 0,
  rotation: 10,
  duration: 0.8,
  ease: "back.out(1.7)",
  stagger: 0.02
});
"""

_MODULE_WORDS = """// Word reveal
const split = new SplitText(".word-reveal", { type: "words" });
gsap.from(split.words, {
  x: -50,
  opacity: 0,
  duration: 0.8,
  ease: "power3.out",
  stagger: 0.1
});
"""

FEATURES = """## Text Animation Features:
- ✅ **SplitText Integration**: Perfect character/word/line control
- ✅ **Performance Optimized**: GPU acceleration and proper cleanup
- ✅ **Responsive**: Adapts to mobile devices
- ✅ **Accessibility**: Respects prefers-reduced-motion
- ✅ **Typography Preservation**: Maintains original styling"""


def main_effect(flags: FeatureFlags) -> str:
    if flags.get("typewriter"):
        return "typewriter"
    if flags.get("char_reveal"):
        return "chars"
    if flags.get("word_reveal"):
        return "words"
    return "lines"


_COMPONENT_EFFECTS = {
    "typewriter": (_COMPONENT_TYPEWRITER, _MARKUP_TYPEWRITER),
    "chars": (_COMPONENT_CHARS, _MARKUP_CHARS),
    "words": (_COMPONENT_WORDS, _MARKUP_WORDS),
    "lines": (_COMPONENT_LINES, _MARKUP_LINES),
}

# The module variant has no line reveal; it falls back to words.
_MODULE_EFFECTS = {
    "typewriter": _MODULE_TYPEWRITER,
    "chars": _MODULE_CHARS,
    "words": _MODULE_WORDS,
    "lines": _MODULE_WORDS,
}


def component_code(flags: FeatureFlags) -> str:
    script, markup = _COMPONENT_EFFECTS[main_effect(flags)]
    return "".join([_COMPONENT_IMPORTS, script, _COMPONENT_LAYERED, markup, _COMPONENT_CLOSE])


def module_code(flags: FeatureFlags) -> str:
    return _MODULE_IMPORTS + _MODULE_EFFECTS[main_effect(flags)]
