"""Static blog posts and eco recommendations."""
from ecolife.models.content import BlogPost, Recommendation

BLOG_POSTS: tuple[BlogPost, ...] = (
    BlogPost(
        id="1",
        title="10 Simple Steps to Reduce Your Carbon Footprint Today",
        excerpt=(
            "Discover practical, actionable ways to minimize your environmental "
            "impact without major lifestyle changes."
        ),
        category="Sustainability",
        author="Emma Green",
        date="2025-11-10",
        image_url=(
            "https://images.unsplash.com/photo-1689606646730-312a90287c99"
            "?crop=entropy&cs=tinysrgb&fit=max&fm=jpg&q=80&w=1080"
        ),
        read_time="5 min",
        content=(
            "Cutting your carbon footprint does not require perfection. The most meaningful progress usually comes from a handful of everyday choices that you repeat over time. In this guide we focus on practical changes that real people actually stick with.\n\n"
            "1) Choose low‑emission transport. For short trips under 2 km, walking or cycling is often just as fast as driving once you include parking. For longer commutes, try public transport a couple of days per week or set up a carpool with colleagues.\n\n"
            "2) Shift a few meals each week to plant‑forward options. Studies from universities in the US and Europe consistently show that replacing red meat with beans, lentils or tofu even two or three times per week can noticeably lower your personal emissions while often saving money.\n\n"
            "3) Power down your home. Swap old bulbs for LEDs, unplug idle chargers, and enable energy‑saving modes on laptops and TVs. Small actions like using a power strip for electronics can cut dozens of kilowatt‑hours over a year.\n\n"
            "4) Optimize heating and cooling. Sealing window and door drafts, closing curtains on hot days, and adjusting your thermostat by just 1–2°C can reduce both bills and emissions. Many city climate programs run free home‑energy checkups—check your local council website.\n\n"
            "5) Buy once, buy well. Before buying something new, ask: can I borrow, repair or buy second‑hand instead? Choosing durable items (like a sturdy reusable bottle or long‑lasting jacket) reduces waste and clutter.\n\n"
            "None of these steps alone will “solve” climate change, but together they move your lifestyle in a lower‑carbon direction while often improving health and finances. Pick one or two changes to start this week and track how they feel over a month."
        ),
    ),
    BlogPost(
        id="2",
        title="The Power of Morning Meditation: A 30-Day Experiment",
        excerpt=(
            "How establishing a daily meditation practice transformed my mental "
            "health and productivity."
        ),
        category="Wellness",
        author="Michael Chen",
        date="2025-11-08",
        image_url=(
            "https://images.unsplash.com/photo-1722094250550-4993fa28a51b"
            "?crop=entropy&cs=tinysrgb&fit=max&fm=jpg&q=80&w=1080"
        ),
        read_time="7 min",
        content=(
            "For 30 days I sat for ten minutes each morning before touching my phone or opening my laptop. The experiment was simple: could a tiny meditation habit change how the rest of the day felt?\n\n"
            "Week 1 was mostly restlessness. My mind replayed yesterday’s conversations and tomorrow’s to‑do list. I used a basic technique taught in many mindfulness courses: noticing the breath at the nostrils and gently returning attention whenever I got distracted. The goal was not “empty mind” but simply practicing coming back.\n\n"
            "By Week 2 my mood felt more even. Research from clinics and universities shows that short, regular mindfulness sessions can reduce perceived stress and improve emotional regulation. I noticed that small frustrations—slow traffic, an awkward email—no longer hijacked my entire morning.\n\n"
            "Week 3 brought clearer priorities. Because I meditated before opening messages, I was already calmer when planning the day. I picked one or two important tasks and protected them with focused time blocks. I also found it easier to say “no” to low‑value requests.\n\n"
            "By Week 4 the habit felt natural, like brushing my teeth. The biggest change was not that life became stress‑free, but that recovery from stressful moments was faster. A few slow breaths during the day reminded my body of the calm state I had practiced in the morning.\n\n"
            "If you want to try something similar, start tiny: sit comfortably, set a 5–10 minute timer, and focus on your breath or sounds. When your mind wanders (it will), notice it kindly and return. Track your streak on paper or in an app—real people keep habits when they stay simple and rewarding."
        ),
    ),
    BlogPost(
        id="3",
        title="Productivity Hacks from Sustainable Living Practices",
        excerpt=(
            "Learn how minimalism and intentional living can boost your "
            "efficiency and focus."
        ),
        category="Productivity",
        author="Sarah Williams",
        date="2025-11-05",
        image_url=(
            "https://images.unsplash.com/photo-1699570044128-b61ef113b72e"
            "?crop=entropy&cs=tinysrgb&fit=max&fm=jpg&q=80&w=1080"
        ),
        read_time="6 min",
        content=(
            "Sustainable living and personal productivity share a surprising rule: fewer, better inputs lead to clearer outcomes. Many people who simplify their homes also report sharper focus at work or school. Here are a few ideas you can borrow from eco‑friendly living to organize your day.\n\n"
            "1) Declutter to decide faster. Just as a minimal wardrobe makes it easier to pick an outfit, a “minimal desk” reduces decision fatigue. Keep only the tools you use daily within arm’s reach; archive the rest. Researchers studying attention show that visual clutter competes for brain resources.\n\n"
            "2) Batch similar tasks the way you might batch errands. Instead of checking email every few minutes, process messages in 2–3 focused blocks. Grouping tasks that use the same mental mode—writing, calls, design—cuts the “switching cost” that drains energy.\n\n"
            "3) Design for reuse. In a low‑waste kitchen you might keep glass jars and containers ready for many purposes. In productivity terms, this means reusable templates: checklists for publishing a post, packing for travel, or preparing a presentation. Each template you create once can save dozens of minutes every time you repeat that type of work.\n\n"
            "4) Close the loop weekly. Sustainability advocates talk about auditing waste; you can do a similar review for time and attention. Once a week, look back at your calendar and ask: what gave me energy, what drained it, and what can I change next week? This small ritual keeps your system honest and aligned with what actually matters.\n\n"
            "You do not need a perfectly optimized life or a perfectly zero‑waste home. Treat both sustainability and productivity as ongoing experiments: try a small tweak, observe the results, and keep the changes that make your days feel lighter and more meaningful."
        ),
    ),
)

RECOMMENDATIONS: tuple[Recommendation, ...] = (
    Recommendation(
        id="transport",
        title="Greener Transport Swaps",
        tips=[
            "Walk or bike short distances under 2 km whenever possible.",
            "Bundle errands into a single trip to reduce emissions.",
            "Try public transport twice a week instead of driving alone.",
        ],
    ),
    Recommendation(
        id="home",
        title="Low-Energy Home Tweaks",
        tips=[
            "Switch to LED bulbs and power strips for idle electronics.",
            "Seal window and door drafts to reduce heating and cooling loss.",
            "Wash clothes in cold water and line-dry when you can.",
        ],
    ),
    Recommendation(
        id="habits",
        title="Micro-Habits That Compound",
        tips=[
            "Carry a reusable bottle and bag every day.",
            "Do a 5-minute nightly audit of waste and energy use.",
            "Schedule one weekly “eco action” like a cleanup or repair.",
        ],
    ),
)
