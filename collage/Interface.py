from collage.Core import SpreadCore, SpreadEvent


class Interface:

    def __init__(self):
        self.core: SpreadCore = None

    def onStart(self):
        self.notifyRedraw()

    def onEvent(self, event: SpreadEvent):
        """
        Invoked after an event has replaced the spread state.
        :param event:
        :return:
        """
        self.notifyRedraw()

    def notifyRedraw(self):
        pass
