"""Sample projects loaded at the start of every session."""

from typing import List

from .models import ProjectItem

SEED_PROJECTS: List[ProjectItem] = [
    ProjectItem(
        id="1",
        title="Portfolio Website",
        description="Portfolio site built with React",
        image="https://picsum.photos/seed/portfolio/600/400",
        meta="React, Next.js",
    ),
    ProjectItem(
        id="2",
        title="Task Board",
        description="Kanban board for tracking team tasks across sprints",
        image="https://picsum.photos/seed/taskboard/600/400",
        meta="TypeScript",
    ),
    ProjectItem(
        id="3",
        title="Weather Dashboard",
        description="Live forecasts and radar maps for saved locations",
        image="https://picsum.photos/seed/weather/600/400",
        meta="API, Charts",
    ),
    ProjectItem(
        id="4",
        title="Recipe Finder",
        description="Search recipes by ingredient and save favourites",
        meta="Search",
    ),
    ProjectItem(
        id="5",
        title="Expense Tracker",
        description="Monthly budgets with category breakdowns",
        image="https://picsum.photos/seed/expenses/600/400",
        meta="Finance",
    ),
    ProjectItem(
        id="6",
        title="Chat App",
        image="https://picsum.photos/seed/chat/600/400",
        meta="WebSockets",
    ),
]
