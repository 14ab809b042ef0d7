"""Learning path prompt"""

LEARNING_PATH_TEMPLATE = """
You are a professional learning path architect. Create a detailed, actionable 5-step learning roadmap.

TARGET CAREER: "{target_career}"
CURRENT SKILLS: "{current_skills}"
TIME COMMITMENT: {timeline}
LEARNING STYLE: {learning_style}
BUDGET: {budget}

Create a structured learning path with these sections:

🎯 LEARNING PATH OVERVIEW
- Total estimated time to job-ready
- Difficulty level (Beginner/Intermediate/Advanced)
- Key skills you'll gain

📚 5-STEP ROADMAP

**Step 1: Foundation (Week 1-2)**
- Learning focus: [What to learn]
- Key concepts: [List 3-4 main concepts]
- Resources: [Specific platforms, courses, or materials]
- Deliverable: [What you should complete]

**Step 2: Core Skills (Week 3-6)** 
- Learning focus: [What to learn]
- Key concepts: [List 3-4 main concepts]
- Resources: [Specific platforms, courses, or materials]
- Deliverable: [What you should complete]

**Step 3: Practical Application (Week 7-10)**
- Learning focus: [What to learn]
- Key concepts: [List 3-4 main concepts]  
- Resources: [Specific platforms, courses, or materials]
- Deliverable: [What you should complete]

**Step 4: Advanced Topics (Week 11-14)**
- Learning focus: [What to learn]
- Key concepts: [List 3-4 main concepts]
- Resources: [Specific platforms, courses, or materials]
- Deliverable: [What you should complete]

**Step 5: Career Preparation (Week 15-16)**
- Learning focus: [What to learn]
- Key concepts: [List 3-4 main concepts]
- Resources: [Specific platforms, courses, or materials]
- Deliverable: [What you should complete]

💡 SUCCESS TIPS
- Daily/weekly study schedule recommendation
- How to track progress
- Common pitfalls to avoid
- Networking opportunities

🔗 RECOMMENDED RESOURCES
Based on budget: {budget}
- Free resources
- Paid courses (if applicable)
- Books and documentation
- Communities and forums

Make it specific, actionable, and tailored to their learning style and time commitment."""

