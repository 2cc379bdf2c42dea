# ipl_tracker/seed.py
from __future__ import annotations

from typing import Dict, List


def create_ipl_roster() -> List[Dict[str, str]]:
    """
    The ten IPL franchises the server starts with.
    All stats start at zero.
    """
    return [
        {"name": "Mumbai Indians", "short_name": "MI", "captain": "Hardik Pandya", "home_ground": "Wankhede Stadium", "color": "#004B9B"},
        {"name": "Chennai Super Kings", "short_name": "CSK", "captain": "MS Dhoni", "home_ground": "M.A. Chidambaram Stadium", "color": "#F9CD05"},
        {"name": "Royal Challengers Bangalore", "short_name": "RCB", "captain": "Faf du Plessis", "home_ground": "M. Chinnaswamy Stadium", "color": "#EC1C24"},
        {"name": "Kolkata Knight Riders", "short_name": "KKR", "captain": "Shreyas Iyer", "home_ground": "Eden Gardens", "color": "#3A225D"},
        {"name": "Delhi Capitals", "short_name": "DC", "captain": "Rishabh Pant", "home_ground": "Arun Jaitley Stadium", "color": "#17479E"},
        {"name": "Punjab Kings", "short_name": "PBKS", "captain": "Shikhar Dhawan", "home_ground": "IS Bindra Stadium", "color": "#DD1F2D"},
        {"name": "Rajasthan Royals", "short_name": "RR", "captain": "Sanju Samson", "home_ground": "Sawai Mansingh Stadium", "color": "#E01A85"},
        {"name": "Sunrisers Hyderabad", "short_name": "SRH", "captain": "Pat Cummins", "home_ground": "Rajiv Gandhi Intl Stadium", "color": "#FF822A"},
        {"name": "Gujarat Titans", "short_name": "GT", "captain": "Shubman Gill", "home_ground": "Narendra Modi Stadium", "color": "#1B2133"},
        {"name": "Lucknow Super Giants", "short_name": "LSG", "captain": "KL Rahul", "home_ground": "Ekana Cricket Stadium", "color": "#1FB8EA"},
    ]

