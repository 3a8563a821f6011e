"""
Smart home controller with undo.

Every device action is a command object holding the receiver and its
arguments, so the controller can keep a history and reverse it.
"""

from abc import ABC, abstractmethod
from typing import List


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        pass

    @abstractmethod
    def undo(self) -> None:
        pass


class Light:
    def turn_on(self) -> None:
        print("Light: Turned on")

    def turn_off(self) -> None:
        print("Light: Turned off")


class Thermostat:
    def set_temperature(self, temperature: int) -> None:
        print(f"Thermostat: Set temperature to {temperature}°C")

    def reset(self) -> None:
        print("Thermostat: Reset to default temperature")


class SecuritySystem:
    def activate(self) -> None:
        print("SecuritySystem: Activated")

    def deactivate(self) -> None:
        print("SecuritySystem: Deactivated")


class LightOnCommand(Command):
    def __init__(self, light: Light):
        self.light = light

    def execute(self) -> None:
        self.light.turn_on()

    def undo(self) -> None:
        self.light.turn_off()


class ThermostatSetCommand(Command):
    def __init__(self, thermostat: Thermostat, temperature: int):
        self.thermostat = thermostat
        self.temperature = temperature

    def execute(self) -> None:
        self.thermostat.set_temperature(self.temperature)

    def undo(self) -> None:
        self.thermostat.reset()


class SecuritySystemActivateCommand(Command):
    def __init__(self, security_system: SecuritySystem):
        self.security_system = security_system

    def execute(self) -> None:
        self.security_system.activate()

    def undo(self) -> None:
        self.security_system.deactivate()


class HomeAutomationController:
    def __init__(self):
        self.command_history: List[Command] = []

    def execute_command(self, command: Command) -> None:
        command.execute()
        self.command_history.append(command)

    def undo_last_command(self) -> bool:
        """Undo the most recent command; False when there is nothing to undo"""
        if not self.command_history:
            return False
        self.command_history.pop().undo()
        return True


def main() -> None:
    light = Light()
    thermostat = Thermostat()
    security_system = SecuritySystem()

    controller = HomeAutomationController()
    controller.execute_command(LightOnCommand(light))
    controller.execute_command(ThermostatSetCommand(thermostat, 22))
    controller.execute_command(SecuritySystemActivateCommand(security_system))

    print("\n--- Undo Last Command ---\n")
    controller.undo_last_command()

    print("\n--- Undo Another Command ---\n")
    controller.undo_last_command()

    print("\n--- Undo Last Command ---\n")
    controller.undo_last_command()


if __name__ == "__main__":
    main()
