"""
Weather station pushing readings to displays.
"""

from abc import ABC, abstractmethod
from typing import List


class Display(ABC):
    @abstractmethod
    def update(self, station: "WeatherStation") -> None:
        pass

    @abstractmethod
    def display(self) -> None:
        pass


class WeatherStation:
    def __init__(self):
        self._observers: List[Display] = []
        self.temperature: float = 0.0
        self.humidity: float = 0.0

    def attach(self, observer: Display) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Display) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self) -> None:
        for observer in self._observers:
            observer.update(self)

    def set_weather_data(self, temperature: float, humidity: float) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.notify()


class CurrentConditionsDisplay(Display):
    def __init__(self):
        self.temperature = None
        self.humidity = None

    def update(self, station: WeatherStation) -> None:
        self.temperature = station.temperature
        self.humidity = station.humidity
        self.display()

    def display(self) -> None:
        print(
            f"Current Conditions: Temperature: {self.temperature}°C, "
            f"Humidity: {self.humidity}%"
        )


class ForecastDisplay(Display):
    """Naive forecast: tomorrow is one degree warmer than today"""

    def __init__(self):
        self.temperature = None

    def update(self, station: WeatherStation) -> None:
        self.temperature = station.temperature
        self.display()

    @property
    def forecast(self) -> float:
        return self.temperature + 1

    def display(self) -> None:
        print(f"Forecast: The temperature is expected to be {self.forecast}°C tomorrow.")


def main() -> None:
    station = WeatherStation()
    station.attach(CurrentConditionsDisplay())
    station.attach(ForecastDisplay())

    print("Setting new weather data:")
    station.set_weather_data(25.5, 60)

    print("\nSetting new weather data:")
    station.set_weather_data(28.0, 55)


if __name__ == "__main__":
    main()
