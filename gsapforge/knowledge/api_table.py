from __future__ import annotations

from gsapforge.knowledge.schema import KnowledgeTable, ReferenceEntry, bullets, code, inline, labeled

CORE_METHODS: tuple[ReferenceEntry, ...] = (
    ReferenceEntry(
        name="gsap.to",
        kind="core_method",
        description="Animate FROM current values TO specified values - The most common animation method",
        syntax="gsap.to(targets, vars)",
        sections=(
            labeled(
                "Parameters",
                {
                    "targets": "String selector, object, or array of elements to animate",
                    "vars": "Object containing properties to animate and configuration",
                },
            ),
            code(
                "Examples",
                {
                    "basic": 'gsap.to(".element", { x: 100, duration: 1 })',
                    "advanced": (
                        'gsap.to(".elements", { x: 100, rotation: 360, scale: 1.5, duration: 2, '
                        'ease: "power3.out", stagger: 0.2 })'
                    ),
                    "complex": (
                        'gsap.to(".element", { css: { transform: "translateX(100px) rotate(45deg)" }, '
                        'duration: 1.5, ease: CustomEase.create("custom", "M0,0 C0.14,0 0.242,0.438 0.272,0.561 '
                        '0.313,0.728 0.354,0.963 0.362,1 0.37,0.985 0.414,0.961 0.455,0.905 0.51,0.826 0.57,0.73 '
                        '0.628,0.63 0.709,0.491 0.86,0.413 1,0.413") })'
                    ),
                },
            ),
            inline(
                "Animatable Properties",
                [
                    "x", "y", "z", "rotation", "rotationX", "rotationY", "rotationZ",
                    "scale", "scaleX", "scaleY", "scaleZ", "opacity", "alpha", "autoAlpha",
                ],
            ),
            inline(
                "CSS Properties",
                ["left", "top", "width", "height", "backgroundColor", "borderRadius", "fontSize", "lineHeight"],
            ),
            inline(
                "Special Properties",
                ["duration", "delay", "ease", "repeat", "yoyo", "stagger", "onComplete", "onUpdate", "onStart"],
            ),
            bullets(
                "Performance Tips",
                [
                    "Use transform properties (x, y, scale, rotation) for GPU acceleration",
                    "Set force3D: true for complex animations",
                    "Use will-change CSS property",
                ],
                detail="advanced",
            ),
        ),
    ),
    ReferenceEntry(
        name="gsap.from",
        kind="core_method",
        description="Animate FROM specified values TO current values - Perfect for entrance animations",
        syntax="gsap.from(targets, vars)",
        sections=(
            code(
                "Examples",
                {
                    "entrance": 'gsap.from(".cards", { y: 100, opacity: 0, duration: 1, stagger: 0.2, ease: "power3.out" })',
                    "reveal": 'gsap.from(".text", { x: -50, opacity: 0, duration: 0.8, delay: 0.3 })',
                    "scale_in": 'gsap.from(".modal", { scale: 0, opacity: 0, duration: 0.5, ease: "back.out(1.7)" })',
                },
            ),
            bullets("Use Cases", ["Page load animations", "Element reveals", "Modal entrances", "Card appearances"]),
        ),
    ),
    ReferenceEntry(
        name="gsap.fromTo",
        kind="core_method",
        description="Animate FROM specified values TO other specified values - Maximum control",
        syntax="gsap.fromTo(targets, fromVars, toVars)",
        sections=(
            code(
                "Examples",
                {
                    "precise": 'gsap.fromTo(".element", { x: -100, opacity: 0 }, { x: 100, opacity: 1, duration: 2 })',
                    "color_transition": (
                        'gsap.fromTo(".bg", { backgroundColor: "#ff0000" }, { backgroundColor: "#00ff00", duration: 1 })'
                    ),
                    "complex_morph": (
                        'gsap.fromTo(".shape", { scale: 0.5, rotation: 0, borderRadius: "0%" }, '
                        '{ scale: 1.5, rotation: 180, borderRadius: "50%", duration: 2, ease: "elastic.out(1, 0.3)" })'
                    ),
                },
            ),
            bullets("Advantages", ["Explicit start and end values", "Better for complex animations", "Clearer intent"]),
        ),
    ),
    ReferenceEntry(
        name="gsap.set",
        kind="core_method",
        description="Immediately set properties without animation - Instant transforms",
        syntax="gsap.set(targets, vars)",
        sections=(
            code(
                "Examples",
                {
                    "initial_state": 'gsap.set(".elements", { x: 0, y: 0, opacity: 1, scale: 1 })',
                    "reset": 'gsap.set(".animated", { clearProps: "all" })',
                    "setup": 'gsap.set(".cards", { y: 50, opacity: 0, transformOrigin: "center bottom" })',
                },
            ),
            bullets(
                "Use Cases",
                ["Setting initial states", "Resetting animations", "Preparing elements", "Clearing properties"],
            ),
        ),
    ),
    ReferenceEntry(
        name="gsap.timeline",
        kind="core_method",
        description="Create animation sequences - The heart of complex animations",
        syntax="gsap.timeline(vars)",
        sections=(
            inline(
                "Methods",
                ["add", "to", "from", "fromTo", "set", "call", "addLabel", "play", "pause", "reverse", "restart"],
            ),
            code(
                "Examples",
                {
                    "basic": 'const tl = gsap.timeline(); tl.to(".first", { x: 100 }).to(".second", { y: 100 });',
                    "with_labels": (
                        'tl.addLabel("start").to(".element", { x: 100 }).addLabel("middle").to(".element", { y: 100 });'
                    ),
                    "stagger_sequence": (
                        'tl.from(".cards", { y: 100, opacity: 0, stagger: 0.2 }).to(".title", { scale: 1.2 }, "-=0.5");'
                    ),
                },
            ),
            labeled(
                "Positioning",
                {
                    "absolute": "1.5 (start at 1.5 seconds)",
                    "relative": '"-=0.5" (start 0.5 seconds before previous ends)',
                    "gap": '"+=0.2" (start 0.2 seconds after previous ends)',
                    "label": '"myLabel" (start at label position)',
                },
                detail="intermediate",
            ),
        ),
    ),
    ReferenceEntry(
        name="gsap.delayedCall",
        kind="core_method",
        description="Execute function after delay with GSAP timing system",
        syntax="gsap.delayedCall(delay, callback, params, scope)",
        sections=(
            code(
                "Examples",
                {
                    "basic": 'gsap.delayedCall(2, () => console.log("Hello after 2 seconds"));',
                    "with_params": 'gsap.delayedCall(1.5, showMessage, ["Animation complete!", "success"]);',
                    "sequence": "gsap.delayedCall(0.5, startNextAnimation);",
                },
            ),
        ),
    ),
)

PLUGINS: tuple[ReferenceEntry, ...] = (
    ReferenceEntry(
        name="ScrollTrigger",
        kind="plugin",
        tier="FREE",
        description="Scroll-based animation system with pinning, scrubbing and batching",
        sections=(
            labeled(
                "Methods",
                {
                    "ScrollTrigger.create": "Create individual scroll triggers",
                    "ScrollTrigger.batch": "Batch process multiple elements for performance",
                    "ScrollTrigger.refresh": "Recalculate trigger positions",
                    "ScrollTrigger.update": "Force update all triggers",
                    "ScrollTrigger.kill": "Remove specific triggers",
                    "ScrollTrigger.killAll": "Remove all triggers",
                    "ScrollTrigger.getAll": "Get array of all triggers",
                    "ScrollTrigger.addEventListener": "Listen for ScrollTrigger events",
                    "ScrollTrigger.matchMedia": "Responsive scroll triggers",
                },
            ),
            labeled(
                "Properties",
                {
                    "trigger": "Element that triggers the animation",
                    "start": 'When animation starts (e.g., "top 80%")',
                    "end": 'When animation ends (e.g., "bottom 20%")',
                    "scrub": "Link animation progress to scroll progress",
                    "pin": "Pin element during scroll",
                    "snap": "Snap to specific scroll positions",
                    "toggleActions": "Actions for onEnter, onLeave, onEnterBack, onLeaveBack",
                    "animation": "GSAP animation to control",
                    "onEnter": "Callback when entering trigger area",
                    "onLeave": "Callback when leaving trigger area",
                    "onUpdate": "Callback on every scroll update",
                    "markers": "Show visual markers for debugging",
                },
            ),
            code(
                "Examples",
                {
                    "basic": """ScrollTrigger.create({
  trigger: ".section",
  start: "top 80%",
  end: "bottom 20%",
  animation: gsap.from(".element", { y: 100, opacity: 0 }),
  toggleActions: "play none none reverse"
})""",
                    "scrub": """gsap.to(".parallax", {
  y: -300,
  scrollTrigger: {
    trigger: ".section",
    start: "top bottom",
    end: "bottom top",
    scrub: 1
  }
})""",
                    "pin": """ScrollTrigger.create({
  trigger: ".pin-section",
  start: "top top",
  end: "bottom top",
  pin: true,
  animation: gsap.timeline()
    .to(".pinned-element", { x: 100 })
    .to(".pinned-element", { rotation: 360 })
})""",
                    "batch": """ScrollTrigger.batch(".fade-in", {
  onEnter: elements => gsap.from(elements, { y: 100, opacity: 0, stagger: 0.1 }),
  onLeave: elements => gsap.to(elements, { opacity: 0.3 }),
  onEnterBack: elements => gsap.to(elements, { opacity: 1 }),
  onLeaveBack: elements => gsap.to(elements, { y: 100, opacity: 0 })
})""",
                },
            ),
            bullets(
                "Performance Optimization",
                [
                    "Use ScrollTrigger.batch() for multiple elements",
                    "Set refreshPriority for critical triggers",
                    "Use pin: true sparingly for better performance",
                    "Combine multiple animations into timelines",
                ],
                detail="advanced",
            ),
        ),
    ),
    ReferenceEntry(
        name="SplitText",
        kind="plugin",
        tier="PREMIUM_NOW_FREE",
        description="Text animation control - split text into characters, words or lines",
        syntax="new SplitText(targets, vars)",
        sections=(
            labeled(
                "Split Types",
                {
                    "chars": "Split into individual characters",
                    "words": "Split into individual words",
                    "lines": "Split into individual lines",
                    "combined": '"chars,words,lines" for maximum control',
                },
            ),
            labeled(
                "Properties",
                {
                    "type": 'What to split: "chars", "words", "lines", or combinations',
                    "charsClass": "CSS class for character spans",
                    "wordsClass": "CSS class for word spans",
                    "linesClass": "CSS class for line divs",
                    "tag": 'HTML tag to use for splits (default: "div" for lines, "span" for others)',
                    "wordsDelimiter": "Character that defines word boundaries",
                    "charsDelimiter": "Character that defines character boundaries",
                },
            ),
            labeled("Methods", {"revert": "Restore original text", "split": "Re-split with new settings"}),
            code(
                "Examples",
                {
                    "char_reveal": """const split = new SplitText(".title", { type: "chars" });
gsap.from(split.chars, {
  y: 100,
  opacity: 0,
  rotation: 10,
  duration: 0.8,
  ease: "power3.out",
  stagger: 0.02
});""",
                    "word_stagger": """const split = new SplitText(".paragraph", { type: "words" });
gsap.from(split.words, {
  y: 50,
  opacity: 0,
  duration: 0.6,
  ease: "power2.out",
  stagger: 0.1
});""",
                    "line_animation": """const split = new SplitText(".text", { type: "lines" });
gsap.from(split.lines, {
  x: -100,
  opacity: 0,
  duration: 1,
  ease: "power3.out",
  stagger: 0.3
});""",
                    "complex_split": """const split = new SplitText(".complex", { type: "chars,words,lines" });
const tl = gsap.timeline();
tl.from(split.lines, { y: 100, opacity: 0, stagger: 0.1 })
  .from(split.words, { scale: 0, stagger: 0.05 }, "-=0.5")
  .from(split.chars, { rotation: 90, stagger: 0.01 }, "-=0.8");""",
                },
            ),
            code(
                "Responsive Handling",
                {
                    "match_media": """let split;
ScrollTrigger.matchMedia({
  "(min-width: 768px)": function() {
    split = new SplitText(".responsive-text", { type: "chars" });
    gsap.from(split.chars, { y: 50, opacity: 0, stagger: 0.02 });
  },
  "(max-width: 767px)": function() {
    if (split) split.revert();
    gsap.from(".responsive-text", { y: 30, opacity: 0 });
  }
});""",
                },
                detail="advanced",
            ),
        ),
    ),
    ReferenceEntry(
        name="DrawSVGPlugin",
        kind="plugin",
        tier="PREMIUM_NOW_FREE",
        description="Animate SVG stroke drawing with pixel-perfect control",
        sections=(
            labeled(
                "Properties",
                {
                    "drawSVG": 'Control stroke drawing: "0%" to "100%", "50% 100%", true, false',
                    "strokeDasharray": "Manual control of dash pattern",
                    "strokeDashoffset": "Manual control of dash offset",
                },
            ),
            code(
                "Examples",
                {
                    "simple_draw": """gsap.from(".path", {
  drawSVG: "0%",
  duration: 2,
  ease: "power2.inOut"
});""",
                    "draw_sequence": """const tl = gsap.timeline();
tl.from(".path1", { drawSVG: "0%", duration: 1 })
  .from(".path2", { drawSVG: "0%", duration: 1 }, "-=0.5")
  .from(".path3", { drawSVG: "0%", duration: 1 }, "-=0.5");""",
                    "partial_draw": """gsap.fromTo(".path",
  { drawSVG: "50% 50%" },
  { drawSVG: "0% 100%", duration: 2 }
);""",
                    "reverse_draw": """gsap.to(".path", {
  drawSVG: "100% 0%",
  duration: 1.5,
  ease: "power3.in"
});""",
                },
            ),
            bullets(
                "SVG Optimization",
                [
                    'Use vector-effect="non-scaling-stroke" for consistent stroke width',
                    "Optimize path complexity for smooth animation",
                    'Set stroke-linecap="round" for smoother endpoints',
                ],
                detail="advanced",
            ),
        ),
    ),
    ReferenceEntry(
        name="MorphSVGPlugin",
        kind="plugin",
        tier="PREMIUM_NOW_FREE",
        description="Morph between different SVG shapes with path interpolation",
        sections=(
            labeled(
                "Methods",
                {
                    "MorphSVGPlugin.convertToPath": "Convert shapes to paths for morphing",
                    "MorphSVGPlugin.pathDataToBezier": "Convert path data to bezier points",
                    "MorphSVGPlugin.stringToRawPath": "Parse path string to raw data",
                },
            ),
            labeled(
                "Properties",
                {
                    "morphSVG": "Target shape to morph to",
                    "shapeIndex": "Control which shape to morph to in multi-shape targets",
                    "map": "Custom point mapping for better morphing",
                },
            ),
            code(
                "Examples",
                {
                    "shape_morph": """gsap.to("#shape1", {
  morphSVG: "#shape2",
  duration: 2,
  ease: "power2.inOut"
});""",
                    "path_morph": """gsap.to(".path", {
  morphSVG: "M100,100 L200,100 L150,200 Z",
  duration: 1.5,
  ease: "elastic.out(1, 0.3)"
});""",
                    "complex_morph": """const tl = gsap.timeline({ repeat: -1, yoyo: true });
tl.to(".star", { morphSVG: ".circle", duration: 1 })
  .to(".star", { morphSVG: ".square", duration: 1 })
  .to(".star", { morphSVG: ".triangle", duration: 1 });""",
                },
            ),
        ),
    ),
    ReferenceEntry(
        name="MotionPathPlugin",
        kind="plugin",
        tier="PREMIUM_NOW_FREE",
        description="Animate elements along custom paths with precise control",
        sections=(
            labeled(
                "Properties",
                {
                    "motionPath": "Path to follow (SVG path, array of points, or path data)",
                    "align": "Align element to path orientation",
                    "alignOrigin": "Point on element to align with path",
                    "autoRotate": "Auto-rotate element to follow path direction",
                    "start": "Starting position on path (0 to 1)",
                    "end": "Ending position on path (0 to 1)",
                },
            ),
            code(
                "Examples",
                {
                    "basic_path": """gsap.to(".element", {
  motionPath: {
    path: "#path",
    align: "#path",
    autoRotate: true,
    alignOrigin: [0.5, 0.5]
  },
  duration: 3,
  ease: "power2.inOut"
});""",
                    "curved_path": """gsap.to(".car", {
  motionPath: {
    path: "M0,0 Q100,-100 200,0 T400,0",
    autoRotate: 90,
    align: "self"
  },
  duration: 4,
  ease: "none"
});""",
                    "partial_path": """gsap.to(".element", {
  motionPath: {
    path: "#curve",
    start: 0.2,
    end: 0.8
  },
  duration: 2
});""",
                },
            ),
        ),
    ),
    ReferenceEntry(
        name="Draggable",
        kind="plugin",
        tier="PREMIUM_NOW_FREE",
        description="Drag and drop interactions with optional inertia",
        sections=(
            inline("Types", ["x", "y", "x,y", "rotation", "top,left", "scrollTop", "scrollLeft"]),
            labeled(
                "Properties",
                {
                    "type": "What can be dragged",
                    "bounds": "Boundaries for dragging",
                    "edgeResistance": "Resistance at boundaries (0-1)",
                    "throwProps": "Physics-based momentum",
                    "snap": "Snap to grid or custom function",
                    "inertia": "Enable momentum physics",
                },
            ),
            inline("Events", ["onDragStart", "onDrag", "onDragEnd", "onThrowUpdate", "onThrowComplete"]),
            code(
                "Examples",
                {
                    "basic_drag": """Draggable.create(".draggable", {
  type: "x,y",
  bounds: "#container",
  edgeResistance: 0.65,
  onDragStart: function() {
    gsap.to(this.target, { scale: 1.1, duration: 0.2 });
  },
  onDragEnd: function() {
    gsap.to(this.target, { scale: 1, duration: 0.2 });
  }
});""",
                    "with_physics": """Draggable.create(".physics-drag", {
  type: "x,y",
  inertia: true,
  bounds: window,
  edgeResistance: 0.65,
  throwProps: true
});""",
                    "snap_grid": """Draggable.create(".snap-drag", {
  type: "x,y",
  snap: {
    x: function(endValue) { return Math.round(endValue / 50) * 50; },
    y: function(endValue) { return Math.round(endValue / 50) * 50; }
  }
});""",
                },
            ),
        ),
    ),
)

GUIDES: tuple[ReferenceEntry, ...] = (
    ReferenceEntry(
        name="Easing",
        kind="guide",
        description="Built-in ease families, direction modifiers and configurable eases",
        sections=(
            labeled(
                "Basic",
                {
                    "none": "Linear motion with no easing",
                    "power1": "Slight ease (equivalent to cubic-bezier(0.25, 0.1, 0.25, 1))",
                    "power2": "Medium ease (most commonly used)",
                    "power3": "Strong ease (recommended for most animations)",
                    "power4": "Very strong ease (dramatic effect)",
                },
            ),
            labeled(
                "Advanced",
                {
                    "back": "Overshoots then settles (great for UI elements)",
                    "elastic": "Bouncy, spring-like motion",
                    "bounce": "Ball bouncing effect",
                    "circ": "Circular motion curve",
                    "expo": "Exponential curve (dramatic acceleration)",
                    "sine": "Sine wave curve (smooth and natural)",
                },
            ),
            labeled(
                "Modifiers",
                {
                    ".in": "Ease in (slow start)",
                    ".out": "Ease out (slow end) - most natural",
                    ".inOut": "Ease in and out (slow start and end)",
                },
            ),
            labeled(
                "Custom Functions",
                {
                    "back.out(1.7)": "Back ease with custom overshoot amount",
                    "elastic.out(1, 0.3)": "Elastic with custom amplitude and period",
                    "steps(5)": "Stepped animation with 5 steps",
                    'rough({ template: "none.out", strength: 1, points: 20 })': "Rough, irregular motion",
                },
                detail="intermediate",
            ),
        ),
    ),
    ReferenceEntry(
        name="Properties",
        kind="guide",
        description="Every animatable property family",
        sections=(
            inline("Transform: Position", ["x", "y", "z", "left", "top", "right", "bottom"]),
            inline("Transform: Scale", ["scale", "scaleX", "scaleY", "scaleZ"]),
            inline(
                "Transform: Rotation",
                ["rotation", "rotationX", "rotationY", "rotationZ", "rotateX", "rotateY", "rotateZ"],
            ),
            inline("Transform: Skew", ["skew", "skewX", "skewY"]),
            inline("Transform: Perspective", ["perspective", "perspectiveOrigin"]),
            inline("Transform: Origin", ["transformOrigin", "xPercent", "yPercent"]),
            inline("Visual: Opacity", ["opacity", "alpha", "autoAlpha"]),
            inline("Visual: Color", ["color", "backgroundColor", "borderColor", "fill", "stroke"]),
            inline(
                "Visual: Filters",
                ["blur", "brightness", "contrast", "grayscale", "hue-rotate", "saturate", "sepia", "drop-shadow"],
            ),
            inline("Visual: Clip", ["clipPath", "clip"]),
            inline("Visual: Mask", ["mask", "maskPosition", "maskSize"]),
            inline(
                "Layout: Dimensions",
                ["width", "height", "minWidth", "minHeight", "maxWidth", "maxHeight"],
                detail="intermediate",
            ),
            inline(
                "Layout: Spacing",
                ["margin", "marginTop", "marginRight", "marginBottom", "marginLeft"],
                detail="intermediate",
            ),
            inline(
                "Layout: Padding",
                ["padding", "paddingTop", "paddingRight", "paddingBottom", "paddingLeft"],
                detail="intermediate",
            ),
            inline(
                "Layout: Border",
                [
                    "borderWidth", "borderRadius", "borderTopLeftRadius", "borderTopRightRadius",
                    "borderBottomLeftRadius", "borderBottomRightRadius",
                ],
                detail="intermediate",
            ),
            inline("Text: Typography", ["fontSize", "lineHeight", "letterSpacing", "wordSpacing"]),
            inline("Text: Decoration", ["textIndent", "textShadow", "textDecorationColor"]),
            inline("Text: Content", ["text", "innerHTML", "textContent"]),
            inline(
                "SVG: Attributes",
                ["cx", "cy", "r", "rx", "ry", "x1", "y1", "x2", "y2", "width", "height"],
                detail="intermediate",
            ),
            inline(
                "SVG: Styling",
                ["fill", "stroke", "strokeWidth", "strokeDasharray", "strokeDashoffset", "opacity"],
                detail="intermediate",
            ),
        ),
    ),
    ReferenceEntry(
        name="Custom Easing",
        kind="guide",
        description="Create custom easing curves for unique animation feel",
        sections=(
            code(
                "Examples",
                {
                    "rough_ease": (
                        'ease: rough({ template: "none.out", strength: 1, points: 20, taper: "none", '
                        "randomize: true, clamp: false })"
                    ),
                    "custom_bezier": 'ease: CustomEase.create("custom", "M0,0 C0.14,0 0.242,0.438 0.272,0.561")',
                    "bounce_custom": (
                        'ease: CustomBounce.create("myBounce", { strength: 0.7, endAtStart: false, squash: 2 })'
                    ),
                },
                detail="basic",
            ),
        ),
    ),
    ReferenceEntry(
        name="Physics Simulations",
        kind="guide",
        description="Create realistic physics-based animations",
        sections=(
            code(
                "Examples",
                {
                    "gravity": "Physics2DPlugin.create({ velocity: 100, angle: 45, gravity: 500 })",
                    "spring": 'ease: "elastic.out(1, 0.3)", duration: 2',
                    "pendulum": 'rotation: "+=360", transformOrigin: "50% 0%", ease: "sine.inOut"',
                },
                detail="basic",
            ),
        ),
    ),
    ReferenceEntry(
        name="Data Visualization",
        kind="guide",
        description="Animate charts, graphs, and data presentations",
        sections=(
            code(
                "Examples",
                {
                    "counter": (
                        "gsap.to(obj, { value: 1000, duration: 2, "
                        "onUpdate: () => element.textContent = Math.round(obj.value) })"
                    ),
                    "progress_ring": 'drawSVG: "0% 75%", rotation: -90, transformOrigin: "center"',
                    "bar_chart": 'scaleY: data.value, transformOrigin: "bottom", stagger: 0.1',
                },
                detail="basic",
            ),
        ),
    ),
    ReferenceEntry(
        name="Performance Utilities",
        kind="guide",
        description="Drop-in frame-rate and heap monitors for profiling animations",
        sections=(
            code(
                "Utilities",
                {
                    "fps_monitor": """const fpsMonitor = {
  fps: 0,
  frames: 0,
  lastTime: performance.now(),

  update() {
    this.frames++;
    const currentTime = performance.now();
    if (currentTime >= this.lastTime + 1000) {
      this.fps = Math.round((this.frames * 1000) / (currentTime - this.lastTime));
      this.frames = 0;
      this.lastTime = currentTime;
      console.log("FPS:", this.fps);
    }
    requestAnimationFrame(() => this.update());
  }
};""",
                    "memory_tracker": """const memoryTracker = {
  track() {
    if (performance.memory) {
      const memory = performance.memory;
      console.log({
        used: Math.round(memory.usedJSHeapSize / 1048576) + " MB",
        total: Math.round(memory.totalJSHeapSize / 1048576) + " MB",
        limit: Math.round(memory.jsHeapSizeLimit / 1048576) + " MB"
      });
    }
  }
};""",
                },
                detail="basic",
            ),
        ),
    ),
)

KNOWLEDGE_TABLE = KnowledgeTable(CORE_METHODS + PLUGINS + GUIDES)
