"""
ai package – Behavior layer for the patrol enemy.

Modules:
    ai_core            – PatrolBrain state machine (patrol/chase/attack/stunned/idle)
    idle_system        – IdleFormSelector: timed idle episodes and random forms
    stats              – PatrolStats per-run tracking and trace plot
    simulation_runner  – Headless scripted run (python main.py --simulate N)
"""
