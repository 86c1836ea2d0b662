"""systems package – Movement integration, physics, timers, animation, port interfaces."""

from .ports import ContactResult, RayHit, PhysicsBody, EdgeSensor, AnimationPort, IdleTimer
from .movement_system import MovementConfig, MovementState, MovementIntegrator, AnimationClip
from .physics_system import PlatformWorld, KinematicBody, RayEdgeSensor
from .timer_system import OneShotTimer, TimerService
from .animation_system import AnimationPlayer, choose_clip, dispatch_animation
