from collage.Core import AXIS_UNIFORM, AXIS_X, AXIS_Y, SpreadCore
from collage.Geometry import DEMO_SLOTS
from collage.Interface import Interface
from collage.State import SpreadState, initialState, storedValue

COMMAND_AXES = {"u": AXIS_UNIFORM, "x": AXIS_X, "y": AXIS_Y}
HELP_TEXT = "Commands: u <n>, x <n>, y <n>, mode, show, quit"


class CommandLineInterface(Interface):

    def printAll(self):
        state = self.core.state
        spreadX, spreadY = self.core.effectiveSpread()
        if state.isUniform():
            values = f"uniform={state.uniform:g}"
        else:
            values = f"x={storedValue(state.customX):g}  y={storedValue(state.customY):g}"
        print(f"Mode: {state.mode.value}    {values}    Effective: X={spreadX:g} Y={spreadY:g}")
        print("slot            top     left    rotate")
        for slot, pos in self.core.positions(DEMO_SLOTS):
            print(f"{slot.value:<14}{pos.top:>6g}%  {pos.left:>6g}%  {pos.rotate:>5g}")
        print()

    def onStart(self):
        print("Spread demo started!")
        print(HELP_TEXT)
        super().onStart()

    def notifyRedraw(self):
        self.printAll()


def runCommand(core: SpreadCore, command: str) -> bool:
    """Handles one input line. Returns False once the user asks to quit."""
    parts = command.split()
    if not parts:
        return True
    name = parts[0].lower()
    if name in ("quit", "exit", "q"):
        return False
    if name == "mode":
        core.askToggleMode()
    elif name == "show":
        core.interface.notifyRedraw()
    elif name in COMMAND_AXES:
        if len(parts) < 2:
            print("Missing value!")
        elif not core.askTypedValue(COMMAND_AXES[name], parts[1]):
            print("Unchanged.")
    else:
        print("Invalid command!")
        print(HELP_TEXT)
    return True


def main(state: SpreadState = None):
    interface = CommandLineInterface()
    core = SpreadCore()
    core.registerInterface(interface)
    core.start(state if state is not None else initialState(10))
    while True:
        try:
            command = input()
        except EOFError:
            break
        if not runCommand(core, command):
            break


if __name__ == '__main__':
    main()
