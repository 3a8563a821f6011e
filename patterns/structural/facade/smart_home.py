"""
Daily routines that hide the individual smart-home devices.
"""


class SmartLights:
    def turn_on(self) -> None:
        print("Turning on the lights...")

    def dim(self) -> None:
        print("Dimming the lights...")


class Thermostat:
    def set_temperature(self, temperature: int) -> None:
        print(f"Setting temperature to {temperature} °C...")


class SecuritySystem:
    def activate(self) -> None:
        print("Activating the security system...")

    def deactivate(self) -> None:
        print("Deactivating the security system...")


class SmartHomeFacade:
    def __init__(self):
        self.lights = SmartLights()
        self.thermostat = Thermostat()
        self.security_system = SecuritySystem()

    def start_morning_routine(self) -> None:
        print("Starting morning routine...")
        self.lights.turn_on()
        self.thermostat.set_temperature(22)
        self.security_system.deactivate()
        print("Morning routine complete!")

    def start_night_routine(self) -> None:
        print("Starting night routine...")
        self.lights.dim()
        self.thermostat.set_temperature(18)
        self.security_system.activate()
        print("Night routine complete!")


def main() -> None:
    facade = SmartHomeFacade()

    print("--- Morning Routine ---")
    facade.start_morning_routine()

    print("\n--- Night Routine ---")
    facade.start_night_routine()


if __name__ == "__main__":
    main()
