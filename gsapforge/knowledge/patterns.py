"""Static production patterns served by ``build_pattern``."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductionPattern:
    name: str
    description: str
    code: str
    features: tuple[str, ...]
    html: str
    css: str = ""


HERO_SECTION = ProductionPattern(
    name="hero-section",
    description="Epic hero section with layered animations and scroll effects",
    code="""// Hero Section Master Pattern
const heroTimeline = gsap.timeline({
  defaults: { ease: "power3.out" }
});

// Staggered hero entrance
heroTimeline
  .from(".hero-bg", {
    scale: 1.2,
    opacity: 0,
    duration: 2,
    ease: "power2.out"
  })
  .from(".hero-title", {
    y: 100,
    opacity: 0,
    duration: 1.2,
    force3D: true
  }, "-=1.5")
  .from(".hero-subtitle", {
    y: 50,
    opacity: 0,
    duration: 1
  }, "-=0.8")
  .from(".hero-cta", {
    scale: 0,
    opacity: 0,
    duration: 0.8,
    ease: "back.out(1.7)"
  }, "-=0.5")
  .from(".hero-scroll-indicator", {
    y: 20,
    opacity: 0,
    repeat: -1,
    yoyo: true,
    duration: 1.5
  }, "-=0.3");

// Parallax scroll effect
gsap.to(".hero-bg", {
  yPercent: -50,
  ease: "none",
  scrollTrigger: {
    trigger: ".hero-section",
    start: "top top",
    end: "bottom top",
    scrub: 1
  }
});""",
    features=("Layered entrance animations", "Parallax background", "Floating CTA button", "Scroll indicator pulse"),
    html="""<section class="hero-section">
  <div class="hero-bg"></div>
  <div class="hero-content">
    <h1 class="hero-title">Amazing Hero Title</h1>
    <p class="hero-subtitle">Compelling subtitle text</p>
    <button class="hero-cta">Get Started</button>
  </div>
  <div class="hero-scroll-indicator">↓</div>
</section>""",
    css=""".hero-section { height: 100vh; position: relative; overflow: hidden; }
.hero-bg { position: absolute; inset: 0; z-index: -1; }
.hero-content { display: flex; flex-direction: column; align-items: center; justify-content: center; height: 100%; }""",
)

SCROLL_SYSTEM = ProductionPattern(
    name="scroll-system",
    description="Complete scroll-based animation system with performance optimization",
    code="""// Production Scroll System
class ScrollAnimationSystem {
  constructor() {
    this.initScrollAnimations();
    this.initParallax();
    this.initProgressIndicator();
  }

  initScrollAnimations() {
    // Batch process for performance
    ScrollTrigger.batch(".scroll-reveal", {
      onEnter: (elements) => {
        gsap.fromTo(elements,
          { y: 100, opacity: 0, scale: 0.8 },
          {
            y: 0,
            opacity: 1,
            scale: 1,
            duration: 1.2,
            stagger: 0.15,
            ease: "power3.out",
            force3D: true,
            clearProps: "transform,opacity"
          }
        );
      },
      onLeave: (elements) => {
        gsap.to(elements, { opacity: 0.7, scale: 0.95, duration: 0.3 });
      },
      onEnterBack: (elements) => {
        gsap.to(elements, { opacity: 1, scale: 1, duration: 0.3 });
      },
      start: "top 80%",
      end: "bottom 20%"
    });
  }

  initParallax() {
    gsap.utils.toArray(".parallax").forEach(element => {
      const speed = element.dataset.speed || 0.5;
      gsap.to(element, {
        yPercent: -50 * speed,
        ease: "none",
        scrollTrigger: {
          trigger: element.closest("section"),
          start: "top bottom",
          end: "bottom top",
          scrub: 1,
          refreshPriority: -1
        }
      });
    });
  }

  initProgressIndicator() {
    gsap.to(".progress-bar", {
      scaleX: 1,
      ease: "none",
      scrollTrigger: {
        trigger: "body",
        start: "top top",
        end: "bottom bottom",
        scrub: 1
      }
    });
  }
}

// Initialize system
new ScrollAnimationSystem();""",
    features=("Batch processing for performance", "Multiple parallax speeds", "Progress indicator", "Memory cleanup"),
    html="""<div class="progress-bar"></div>
<section class="parallax" data-speed="0.5">
  <div class="scroll-reveal">Content 1</div>
  <div class="scroll-reveal">Content 2</div>
</section>""",
    css=""".progress-bar { position: fixed; top: 0; left: 0; height: 4px; width: 100%; transform-origin: left; transform: scaleX(0); }""",
)

TEXT_EFFECTS = ProductionPattern(
    name="text-effects",
    description="Advanced text animation system with multiple reveal types",
    code="""// Advanced Text Effects System
class TextAnimationMaster {
  constructor() {
    this.animateHeaders();
    this.animateParagraphs();
    this.createTypewriter();
  }

  animateHeaders() {
    gsap.utils.toArray("h1, h2, h3").forEach(heading => {
      const split = new SplitText(heading, {
        type: "chars",
        charsClass: "char-animate"
      });

      gsap.fromTo(split.chars,
        { y: 100, opacity: 0, rotation: 10, scale: 0.8 },
        {
          y: 0,
          opacity: 1,
          rotation: 0,
          scale: 1,
          duration: 0.8,
          ease: "back.out(1.7)",
          stagger: { amount: 0.8, from: "random" },
          scrollTrigger: {
            trigger: heading,
            start: "top 85%",
            toggleActions: "play none none reverse"
          }
        }
      );
    });
  }

  animateParagraphs() {
    gsap.utils.toArray("p.animate-text").forEach(paragraph => {
      const split = new SplitText(paragraph, { type: "lines" });

      gsap.from(split.lines, {
        y: 50,
        opacity: 0,
        duration: 1,
        stagger: 0.1,
        ease: "power3.out",
        scrollTrigger: {
          trigger: paragraph,
          start: "top 90%"
        }
      });
    });
  }

  createTypewriter() {
    gsap.utils.toArray(".typewriter").forEach(element => {
      const split = new SplitText(element, { type: "chars" });

      gsap.set(split.chars, { opacity: 0 });

      const tl = gsap.timeline({
        scrollTrigger: { trigger: element, start: "top 80%" }
      });

      tl.to(split.chars, {
        opacity: 1,
        duration: 0.05,
        stagger: 0.05,
        ease: "none"
      })
      .to(element, {
        borderRight: "0px",
        duration: 0.5,
        repeat: -1,
        yoyo: true
      });
    });
  }
}

new TextAnimationMaster();""",
    features=("Character-by-character reveals", "Line-based animations", "Typewriter effects", "Random stagger patterns"),
    html="""<h1>Animated Header</h1>
<p class="animate-text">Paragraph with line animation</p>
<div class="typewriter">Typewriter effect text</div>""",
)

LOADING_SEQUENCE = ProductionPattern(
    name="loading-sequence",
    description="Sophisticated loading sequence with progress indication",
    code="""// Master Loading Sequence
class LoadingSequence {
  constructor() {
    this.progress = 0;
    this.timeline = gsap.timeline({ paused: true });
    this.setupSequence();
  }

  setupSequence() {
    this.timeline
      .to(".loading-progress", {
        scaleX: 1,
        duration: 2,
        ease: "power2.inOut",
        onUpdate: () => {
          this.progress = Math.round(this.timeline.progress() * 100);
          document.querySelector(".loading-percentage").textContent = this.progress + "%";
        }
      })
      .to(".loading-text", { opacity: 0, y: -20, duration: 0.5 })
      .to(".loading-container", { y: "-100%", duration: 1, ease: "power3.inOut" })
      .from(".main-content", { y: 30, opacity: 0, duration: 1, ease: "power3.out" }, "-=0.5");
  }

  start() {
    const loadingSteps = [
      { progress: 0.2, delay: 200, text: "Loading assets..." },
      { progress: 0.5, delay: 400, text: "Preparing interface..." },
      { progress: 0.8, delay: 300, text: "Almost ready..." },
      { progress: 1, delay: 200, text: "Complete!" }
    ];

    let currentStep = 0;

    const nextStep = () => {
      if (currentStep < loadingSteps.length) {
        const step = loadingSteps[currentStep];
        gsap.to(this.timeline, { progress: step.progress, duration: 0.5, ease: "power2.out" });
        document.querySelector(".loading-text").textContent = step.text;
        setTimeout(() => {
          currentStep++;
          nextStep();
        }, step.delay);
      } else {
        this.complete();
      }
    };

    nextStep();
  }

  complete() {
    setTimeout(() => this.timeline.play(), 500);
  }
}

window.addEventListener("load", () => {
  new LoadingSequence().start();
});""",
    features=("Realistic progress simulation", "Smooth transitions", "Text updates", "Reveal main content"),
    html="""<div class="loading-container">
  <div class="loading-progress"></div>
  <div class="loading-percentage">0%</div>
  <div class="loading-text">Loading...</div>
</div>
<main class="main-content">
  <!-- Your main content -->
</main>""",
    css=""".loading-container { position: fixed; inset: 0; display: grid; place-items: center; z-index: 100; }
.loading-progress { width: 240px; height: 4px; transform-origin: left; transform: scaleX(0); }""",
)

INTERACTIVE_UI = ProductionPattern(
    name="interactive-ui",
    description="Hover, press and drag feedback for cards and controls",
    code="""// Interactive UI Kit
gsap.registerPlugin(Draggable, InertiaPlugin);

gsap.utils.toArray(".ui-card").forEach(card => {
  const lift = gsap.to(card, {
    y: -8,
    scale: 1.03,
    boxShadow: "0 20px 40px rgba(0,0,0,0.18)",
    duration: 0.3,
    ease: "power2.out",
    paused: true,
    force3D: true
  });

  card.addEventListener("mouseenter", () => lift.play());
  card.addEventListener("mouseleave", () => lift.reverse());
  card.addEventListener("pointerdown", () => gsap.to(card, { scale: 0.97, duration: 0.1 }));
  card.addEventListener("pointerup", () => gsap.to(card, { scale: 1.03, duration: 0.2, ease: "back.out(2)" }));
});

Draggable.create(".ui-slider-handle", {
  type: "x",
  bounds: ".ui-slider",
  inertia: true,
  onDrag() {
    const progress = this.x / this.maxX;
    gsap.set(".ui-slider-fill", { scaleX: progress });
  }
});""",
    features=("Hover lift with reversible tweens", "Press feedback", "Inertia slider", "GPU-friendly transforms"),
    html="""<div class="ui-card">Card</div>
<div class="ui-slider">
  <div class="ui-slider-fill"></div>
  <div class="ui-slider-handle"></div>
</div>""",
    css=""".ui-slider { position: relative; height: 6px; }
.ui-slider-fill { height: 100%; transform-origin: left; transform: scaleX(0); }
.ui-slider-handle { position: absolute; top: -7px; width: 20px; height: 20px; touch-action: none; }""",
)

PAGE_TRANSITIONS = ProductionPattern(
    name="page-transitions",
    description="Overlay-based route transitions with leave and enter timelines",
    code="""// Page Transition Controller
const transition = {
  leave() {
    return gsap.timeline()
      .to(".page-content", { opacity: 0, y: -30, duration: 0.4, ease: "power2.in" })
      .fromTo(".transition-overlay",
        { scaleY: 0, transformOrigin: "bottom" },
        { scaleY: 1, duration: 0.6, ease: "power4.inOut" },
        "-=0.1");
  },

  enter() {
    return gsap.timeline()
      .to(".transition-overlay", { scaleY: 0, transformOrigin: "top", duration: 0.6, ease: "power4.inOut" })
      .from(".page-content", { opacity: 0, y: 30, duration: 0.6, ease: "power3.out", clearProps: "all" }, "-=0.2");
  }
};

async function navigate(url) {
  await transition.leave();
  const html = await fetch(url).then(response => response.text());
  const next = new DOMParser().parseFromString(html, "text/html");
  document.querySelector(".page-content").replaceWith(next.querySelector(".page-content"));
  window.history.pushState({}, "", url);
  ScrollTrigger.refresh();
  await transition.enter();
}""",
    features=("Leave and enter timelines", "Full-screen wipe overlay", "History integration", "ScrollTrigger refresh after swap"),
    html="""<div class="transition-overlay"></div>
<main class="page-content">
  <!-- Routed page content -->
</main>""",
    css=""".transition-overlay { position: fixed; inset: 0; z-index: 50; pointer-events: none; transform: scaleY(0); }""",
)

MICRO_INTERACTIONS = ProductionPattern(
    name="micro-interactions",
    description="Small feedback animations for buttons, toggles and icons",
    code="""// Micro-interaction Library
gsap.utils.toArray(".btn-micro").forEach(button => {
  button.addEventListener("click", () => {
    gsap.timeline()
      .to(button, { scale: 0.92, duration: 0.08, ease: "power1.out" })
      .to(button, { scale: 1, duration: 0.4, ease: "elastic.out(1, 0.4)" });
  });
});

gsap.utils.toArray(".toggle").forEach(toggle => {
  const knob = toggle.querySelector(".toggle-knob");
  toggle.addEventListener("click", () => {
    const on = toggle.classList.toggle("is-on");
    gsap.to(knob, { x: on ? 24 : 0, duration: 0.25, ease: "power2.out" });
  });
});

gsap.utils.toArray(".icon-heart").forEach(icon => {
  icon.addEventListener("click", () => {
    gsap.fromTo(icon,
      { scale: 0.6, rotation: -15 },
      { scale: 1, rotation: 0, duration: 0.5, ease: "back.out(3)" });
  });
});""",
    features=("Elastic button press", "Toggle knob slide", "Icon pop feedback", "Sub-second durations"),
    html="""<button class="btn-micro">Save</button>
<div class="toggle"><span class="toggle-knob"></span></div>
<span class="icon-heart">♥</span>""",
    css=""".toggle { width: 48px; height: 24px; border-radius: 12px; position: relative; }
.toggle-knob { position: absolute; width: 24px; height: 24px; border-radius: 50%; }""",
)

DATA_VISUALIZATION = ProductionPattern(
    name="data-visualization",
    description="Animated counters, bar charts and progress rings driven by data",
    code="""// Data Visualization Animations
gsap.registerPlugin(ScrollTrigger, DrawSVGPlugin);

gsap.utils.toArray(".stat-counter").forEach(counter => {
  const target = { value: 0 };
  gsap.to(target, {
    value: Number(counter.dataset.value),
    duration: 2,
    ease: "power2.out",
    scrollTrigger: { trigger: counter, start: "top 85%" },
    onUpdate: () => { counter.textContent = Math.round(target.value).toLocaleString(); }
  });
});

gsap.from(".chart-bar", {
  scaleY: 0,
  transformOrigin: "bottom",
  duration: 1,
  ease: "power3.out",
  stagger: 0.1,
  scrollTrigger: { trigger: ".chart", start: "top 80%" }
});

gsap.utils.toArray(".progress-ring circle").forEach(ring => {
  gsap.fromTo(ring,
    { drawSVG: "0%" },
    {
      drawSVG: ring.dataset.percent + "%",
      duration: 1.5,
      ease: "power2.inOut",
      scrollTrigger: { trigger: ring, start: "top 85%" }
    });
});""",
    features=("Count-up statistics", "Staggered bar growth", "SVG progress rings", "Scroll-triggered playback"),
    html="""<span class="stat-counter" data-value="1200">0</span>
<div class="chart">
  <div class="chart-bar" style="height: 40%"></div>
  <div class="chart-bar" style="height: 75%"></div>
</div>
<svg class="progress-ring" viewBox="0 0 100 100">
  <circle cx="50" cy="50" r="45" data-percent="72"></circle>
</svg>""",
    css=""".chart { display: flex; align-items: flex-end; gap: 8px; height: 200px; }
.progress-ring { transform: rotate(-90deg); }""",
)

PRODUCTION_PATTERNS: dict[str, ProductionPattern] = {
    row.name: row
    for row in (
        HERO_SECTION,
        SCROLL_SYSTEM,
        TEXT_EFFECTS,
        LOADING_SEQUENCE,
        INTERACTIVE_UI,
        PAGE_TRANSITIONS,
        MICRO_INTERACTIONS,
        DATA_VISUALIZATION,
    )
}

DEFAULT_INDUSTRY = "portfolio"

INDUSTRY_CUSTOMIZATIONS: dict[str, tuple[str, ...]] = {
    "portfolio": ("Add personal branding colors", "Include work showcase animations", "Focus on visual impact"),
    "ecommerce": ("Add product hover effects", "Include cart animations", "Optimize for conversion"),
    "saas": ("Add feature demonstrations", "Include data visualizations", "Focus on user onboarding"),
    "agency": ("Bold, creative animations", "Portfolio showcases", "Client testimonials"),
    "blog": ("Reading progress indicators", "Content reveal animations", "Typography focus"),
    "app": ("Touch-friendly interactions", "Loading states", "Micro-interactions"),
    "game": ("Snappy feedback on player input", "Score and reward celebrations", "Keep frame budget for gameplay"),
}


def get_pattern(name: str) -> ProductionPattern | None:
    return PRODUCTION_PATTERNS.get(str(name or "").strip().lower())


def pattern_names() -> list[str]:
    return list(PRODUCTION_PATTERNS)


def customizations_for(industry: str) -> tuple[str, ...]:
    return INDUSTRY_CUSTOMIZATIONS.get(str(industry or "").strip().lower(), INDUSTRY_CUSTOMIZATIONS[DEFAULT_INDUSTRY])


__all__ = [
    "INDUSTRY_CUSTOMIZATIONS",
    "PRODUCTION_PATTERNS",
    "ProductionPattern",
    "customizations_for",
    "get_pattern",
    "pattern_names",
]
