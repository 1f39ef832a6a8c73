"""
Phrase templates for blueprint composition

Every string is a str.format template. Available substitution points:
{topic} {persona} {vibe} {niche} {audience} {cta} {duration}, plus
{start} {end} {seconds} for segment and editing block templates.
"""
from types import MappingProxyType

# Used in composed text when the matching optional field is blank
FILLERS = MappingProxyType({
    "persona": "a sharp on-camera guide",
    "vibe": "confident and upbeat",
    "niche": "creator growth",
    "audience": "busy creators",
    "cta": "Follow for more",
})

PIPELINE_STEPS = (
    {
        "id": "ideation",
        "label": "Ideation",
        "ownership": "Creator + AI",
        "tool": "ChatGPT / Claude",
        "prompt": (
            "Act as {persona}. Pitch 5 scroll-stopping angles on \"{topic}\" for {audience} "
            "in the {niche} space. Rank them by curiosity gap and pick one."
        ),
        "notes": "Lock one angle before scripting; park the rest as follow-up Shorts.",
    },
    {
        "id": "scripting",
        "label": "Scripting",
        "ownership": "AI Agent",
        "tool": "ChatGPT / Claude",
        "prompt": (
            "Write a {duration}-second vertical video script about \"{topic}\" in the voice of {persona}. "
            "Tone: {vibe}. Structure: hook, setup, payoff, call to action (\"{cta}\")."
        ),
        "notes": "Keep lines under 12 words so captions stay readable.",
    },
    {
        "id": "voice",
        "label": "Voiceover",
        "ownership": "AI Agent",
        "tool": "ElevenLabs",
        "prompt": (
            "Generate a {vibe} read of the \"{topic}\" script as {persona}. "
            "Land the first line inside 2 seconds and keep total runtime at {duration}s."
        ),
        "notes": "Export WAV at 48 kHz; keep a dry take without music.",
    },
    {
        "id": "visuals",
        "label": "Visuals",
        "ownership": "AI Agent",
        "tool": "Midjourney / Runway",
        "prompt": (
            "Create 9:16 b-roll and stills for \"{topic}\" aimed at {audience}. "
            "Style: {vibe}, clean negative space for captions."
        ),
        "notes": "Generate 2 extra shots per segment as editing insurance.",
    },
    {
        "id": "editing",
        "label": "Editing",
        "ownership": "Creator",
        "tool": "CapCut / Premiere Pro",
        "prompt": (
            "Assemble the {duration}s cut for \"{topic}\" using the timeline markers. "
            "Burn in captions and add a cut or zoom every 2-3 seconds."
        ),
        "notes": "Export 1080x1920, 30 fps, loudness around -14 LUFS.",
    },
    {
        "id": "publishing",
        "label": "Publishing",
        "ownership": "Creator + AI",
        "tool": "YouTube Studio",
        "prompt": (
            "Upload the \"{topic}\" Short with the generated title, description and hashtags. "
            "Pin a comment that repeats \"{cta}\"."
        ),
        "notes": "Reply to the first 10 comments within an hour of going live.",
    },
)

SEGMENTS = MappingProxyType({
    "hook": {
        "label": "Hook",
        "narration": "Stop scrolling: {topic}. Here is what {audience} keep getting wrong.",
        "onScreenText": ("{topic}", "Watch to the end"),
        "visuals": (
            "Tight face cam of {persona} with a punch-in on the first word",
            "Bold title card: {topic}",
        ),
        "motion": "Snap zoom in at 0s, whip pan out at {end}s",
        "soundDesign": "Riser into a bass hit on the first word",
        "broll": "Fast vertical montage teasing the result of {topic}, {vibe} lighting",
    },
    "setup": {
        "label": "Setup",
        "narration": (
            "Here is the setup. Most people in {niche} treat {topic} as a one-off. "
            "Treat it as a system and the next {seconds} seconds show how."
        ),
        "onScreenText": ("The old way", "The system way", "Step-by-step"),
        "visuals": (
            "Split screen: messy before vs organized after",
            "Screen recording walkthrough for {topic}",
        ),
        "motion": "Slide-in callouts every 3 seconds, subtle parallax on stills",
        "soundDesign": "Low-key {vibe} beat at -18 dB under the voice, clicks on each callout",
        "broll": "Over-the-shoulder shot of someone working through {topic}",
    },
    "payoff": {
        "label": "Payoff",
        "narration": (
            "The payoff: once {topic} runs on autopilot, {audience} get hours back every week. "
            "That is the whole point."
        ),
        "onScreenText": ("The result", "Hours saved"),
        "visuals": (
            "Before/after metric card",
            "Reaction shot of {persona} reviewing the result",
        ),
        "motion": "Counter animation on the metric, slow push in on the reaction",
        "soundDesign": "Beat drop at {start}s, sparkle accent on the metric reveal",
        "broll": "Clean desk reveal showing {topic} finished, {vibe} color grade",
    },
    "cta": {
        "label": "Call to Action",
        "narration": "{cta}. Save this so you have the {topic} playbook ready.",
        "onScreenText": ("{cta}",),
        "visuals": ("{persona} pointing at the subscribe button", "End card with channel handle"),
        "motion": "Hold steady, pulse animation on the call to action",
        "soundDesign": "Music swells then cuts to silence on the final word",
        "broll": "Loopable closing shot that flows back into the hook for {topic}",
    },
})

EDITING_BLOCKS = MappingProxyType({
    "cold_open": {
        "label": "Cold Open",
        "instructions": "Open on the boldest line about {topic}; no logo, no intro.",
        "shotType": "Extreme close-up",
        "overlay": "Title card: {topic}",
    },
    "context": {
        "label": "Context",
        "instructions": "Frame the problem for {audience} in {seconds}s; cut every 2 seconds.",
        "shotType": "Medium close-up",
        "overlay": "Lower third with {persona}",
    },
    "proof": {
        "label": "Proof",
        "instructions": "Drop receipts from {start}s to {end}s: screenshots, numbers, quick wins.",
        "shotType": "Screen capture",
        "overlay": "Highlight boxes on key numbers",
    },
    "demo": {
        "label": "Demo",
        "instructions": "Walk through {topic} step by step with {vibe} pacing.",
        "shotType": "Over-the-shoulder",
        "overlay": "Numbered step badges",
    },
    "recap": {
        "label": "Recap",
        "instructions": "Recap the win in one sentence and show the end state.",
        "shotType": "Medium shot",
        "overlay": "Checklist animation",
    },
    "end_card": {
        "label": "End Card",
        "instructions": "Deliver \"{cta}\" and end on a frame that loops into the cold open.",
        "shotType": "Face cam",
        "overlay": "CTA banner: {cta}",
    },
})

AUDIO = MappingProxyType({
    "voiceProfile": "{persona} with a {vibe} delivery, close-mic and dry",
    "pacing": "About {words} words in {duration}s (~{wpm} wpm); fastest in the hook, breathe before the call to action",
    "emphasisBeat": "{start}s {label}: lean on \"{phrase}\"",
    "musicPrompt": "{vibe} instrumental for a vertical video about {topic}, builds at the payoff, {duration} seconds, no vocals",
})

ASSETS = MappingProxyType({
    "overlays": (
        "Animated captions synced to the voiceover",
        "Progress bar across the top for {duration}s",
        "CTA banner: {cta}",
    ),
    "brollFallback": "Generic 9:16 b-roll for {niche}",
})

PUBLISHING = MappingProxyType({
    "title": "{topic} | {cta}",
    "description": (
        "{topic}: a {duration}-second breakdown for {audience}.\n"
        "Hosted by {persona}, built for the {niche} crowd.\n\n"
        "{cta}"
    ),
    "thumbnailConcept": "Close-up of {persona} mid-reaction, 3-word headline about {topic}, high-contrast {vibe} background",
})

QA_CHECKS = (
    "Captions match the voiceover word for word",
    "Exported at 9:16 (1080x1920) with safe zones clear of UI",
    "Audio peaks below -1 dBTP and voice sits above music",
    "First frame works as a thumbnail without context",
    "Runtime is exactly {duration}s and the hook lands before 00:03",
    "Call to action \"{cta}\" appears on screen and in the voiceover",
    "Title and description both mention {topic}",
)

SUMMARY = (
    "{duration}-second Short on \"{topic}\" voiced by {persona} for {audience}, "
    "closing on \"{cta}\"."
)
